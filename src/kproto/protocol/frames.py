"""Tagged frame values.

A message on the wire is a sequence of raw frames; what each frame means is
fixed by its position and the message type. The classes here pair a value
with the rule for putting it on the wire, so that a frame layout can be
written down as data.

Each class serializes an instance with :meth:`encode`, and turns a received
frame back into a Python value with the class method :meth:`decode`.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import MalformedMessage


@dataclass(frozen=True)
class Text:
    """A UTF-8 text frame."""

    value: str = ''

    default = ''

    def encode(self) -> bytes:
        return self.value.encode('utf-8')

    @classmethod
    def decode(cls, raw: bytes) -> str:
        try:
            return bytes(raw).decode('utf-8')
        except UnicodeDecodeError as exc:
            raise MalformedMessage('text frame is not valid UTF-8: ' + repr(bytes(raw))) from exc


@dataclass(frozen=True)
class Byte:
    """A single raw byte holding a small integer, such as a type code."""

    value: int = 0

    default = 0

    def __post_init__(self):
        if not 0 <= self.value <= 0xFF:
            raise ValueError('byte frame value out of range: ' + repr(self.value))

    def encode(self) -> bytes:
        return bytes((self.value,))

    @classmethod
    def decode(cls, raw: bytes) -> int:
        if len(raw) == 0:
            raise MalformedMessage('byte frame is empty')
        return raw[0]


@dataclass(frozen=True)
class Flag:
    """A boolean carried as a single 0x00 or 0x01 byte."""

    value: bool = False

    default = False

    def encode(self) -> bytes:
        return b'\x01' if self.value else b'\x00'

    @classmethod
    def decode(cls, raw: bytes) -> bool:
        return Byte.decode(raw) != 0x00


@dataclass(frozen=True)
class Word:
    """An unsigned 32-bit integer, big-endian."""

    value: int = 0

    default = 0

    def __post_init__(self):
        if not 0 <= self.value <= 0xFFFFFFFF:
            raise ValueError('word frame value out of range: ' + repr(self.value))

    def encode(self) -> bytes:
        return self.value.to_bytes(4, 'big')

    @classmethod
    def decode(cls, raw: bytes) -> int:
        if len(raw) != 4:
            raise MalformedMessage('word frame must be 4 bytes, got ' + str(len(raw)))
        return int.from_bytes(raw, 'big')


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
