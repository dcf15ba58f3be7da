"""ZMQ multipart framing for kproto messages.

Every message, whatever its type::

    empty, type, fields...

The leading empty frame is the delimiter a ROUTER or DEALER socket expects
between any routing prefix and the message body, so the tuples produced here
go straight to ``send_multipart``, and whatever ``recv_multipart`` returns,
with or without ``copy=False``, can be handed back in.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence, Tuple, Union

import zmq

from ...protocol import Message
from ...protocol.codec import extract
from ...protocol.factory import deserialize

Part = Union[zmq.Frame, bytes, bytearray, memoryview, str]


def _as_bytes(part: Part) -> bytes:

    if isinstance(part, zmq.Frame):
        return part.bytes
    if isinstance(part, str):
        return part.encode('utf-8')
    return bytes(part)


def normalize(parts: Iterable[Part]) -> Tuple[bytes, ...]:
    """Return *parts* as a tuple of bytes, whatever form each part is in."""

    return tuple(_as_bytes(part) for part in parts)


def to_multipart(msg: Union[Message, Iterable[Part]]) -> Tuple[bytes, ...]:
    """Encode a typed message, or an already composed frame sequence, for
    ``send_multipart``.
    """

    if isinstance(msg, Message):
        return msg.frames()
    return normalize(msg)


def from_multipart(parts: Sequence[Part], no_fail: Optional[bool] = None) -> Message:
    """Decode received parts into a typed message."""

    return deserialize(normalize(parts), no_fail=no_fail)


def extract_multipart(parts: Sequence[Part]) -> str:
    """Return the payload carried by received parts."""

    return extract(normalize(parts))
