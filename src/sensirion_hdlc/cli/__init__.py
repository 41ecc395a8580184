"""Command line interface for sensirion_hdlc."""
