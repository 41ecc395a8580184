"""Reserved bytes of the Sensirion HDLC framing.

This module defines the flag and escape bytes, and the SpecialChars model that
lets a link use a different set of reserved bytes (the default matches the
Sensirion devices).
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Mapping
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# Frame delimiter, sent at the start and end of every frame.
FLAG = 0x7E

# Marks the next byte as the substitute of a reserved byte.
ESCAPE = 0x7D

# Substitute = original ^ ESCAPE_XOR
ESCAPE_XOR = 0x20

# Software flow control bytes
XON = 0x11
XOFF = 0x13

Byte = Annotated[int, Field(ge=0, le=255)]


def escape_byte(byte: int) -> int:
    """Escapes or unescapes a byte that follows (or will follow) ESCAPE."""
    return byte ^ ESCAPE_XOR


class SpecialChars(BaseModel):
    """Reserved bytes and the substitutes sent in their place.

    Every byte in ``escape_map()`` is sent on the wire as ``escape`` followed by
    its substitute. The defaults escape only the flag and escape bytes
    themselves.

    Example:
        >>> chars = SpecialChars()
        >>> hex(chars.flag), hex(chars.escaped_flag)
        ('0x7e', '0x5e')
        >>> SpecialChars.with_xon_xoff().escape_map()[0x11]
        49

    Attributes:
        flag: Frame delimiter
        escape: Escape marker
        escaped_flag: Substitute sent after ``escape`` for a ``flag`` payload byte
        escaped_escape: Substitute sent after ``escape`` for an ``escape`` payload byte
        substitutions: Additional ``(original, substitute)`` pairs, sorted by
            original byte. A mapping is accepted on construction.

    Raises:
        ValidationError: If a value is outside 0-255 or two values collide
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    flag: Byte = FLAG
    escape: Byte = ESCAPE
    escaped_flag: Byte = FLAG ^ ESCAPE_XOR
    escaped_escape: Byte = ESCAPE ^ ESCAPE_XOR
    substitutions: tuple[tuple[Byte, Byte], ...] = ()

    @field_validator("substitutions", mode="before")
    @classmethod
    def _pairs_from_mapping(cls, value: Any) -> Any:
        if isinstance(value, Mapping):
            value = value.items()
        elif not isinstance(value, (list, tuple)):
            return value
        try:
            return tuple(sorted(tuple(pair) for pair in value))
        except TypeError:
            # Left for field validation to reject
            return value

    @model_validator(mode="after")
    def _check_unique(self) -> SpecialChars:
        values = [
            self.flag,
            self.escape,
            self.escaped_flag,
            self.escaped_escape,
            *(original for original, _ in self.substitutions),
            *(substitute for _, substitute in self.substitutions),
        ]
        duplicates = sorted(value for value, count in Counter(values).items() if count > 1)
        if duplicates:
            listed = ", ".join(f"0x{value:02X}" for value in duplicates)
            raise ValueError(f"Duplicate special character: {listed}")
        return self

    @classmethod
    def with_xon_xoff(cls) -> SpecialChars:
        """Default set that also keeps XON/XOFF off the wire."""
        return cls(substitutions={XON: escape_byte(XON), XOFF: escape_byte(XOFF)})

    def escape_map(self) -> dict[int, int]:
        """Map every reserved payload byte to the substitute sent after ``escape``."""
        mapping = {self.flag: self.escaped_flag, self.escape: self.escaped_escape}
        mapping.update(self.substitutions)
        return mapping

    def unescape_map(self) -> dict[int, int]:
        """Map every substitute back to the payload byte it stands for."""
        return {substitute: original for original, substitute in self.escape_map().items()}


DEFAULT_CHARS = SpecialChars()
