"""Compose and extract the short messages exchanged with a platform peer.

Layouts, by kind (frame 0 is always empty)::

    loadurl, analysis, generate, info
        empty, PLATFORM_INFO, platform, id, payload, kind

    ok, keepalive, kiq, platform, error, request, fail, status
        empty, code, empty
"""

from __future__ import annotations

import enum
import logging
from typing import Sequence, Tuple, Union

from . import fields
from .errors import MalformedMessage, UnknownKind
from .frames import Byte, Text

logger = logging.getLogger(__name__)


class Kind(enum.Enum):
    """Symbolic message kinds accepted by :func:`compose`."""

    LOADURL = 'loadurl'
    ANALYSIS = 'analysis'
    GENERATE = 'generate'
    INFO = 'info'
    OK = 'ok'
    KEEPALIVE = 'keepalive'
    KIQ = 'kiq'
    PLATFORM = 'platform'
    ERROR = 'error'
    REQUEST = 'request'
    FAIL = 'fail'
    STATUS = 'status'


# Kinds that carry the full PLATFORM_INFO layout, with the kind name itself
# as the trailing subtype frame.

INFO_KINDS = frozenset((Kind.LOADURL, Kind.ANALYSIS, Kind.GENERATE, Kind.INFO))

# Kinds that carry nothing but their type code and one empty frame.

BARE_KINDS = {
    Kind.OK:        fields.OK,
    Kind.KEEPALIVE: fields.KEEPALIVE,
    Kind.KIQ:       fields.KIQ_MESSAGE,
    Kind.PLATFORM:  fields.PLATFORM,
    Kind.ERROR:     fields.PLATFORM_ERROR,
    Kind.REQUEST:   fields.PLATFORM_REQUEST,
    Kind.FAIL:      fields.FAIL,
    Kind.STATUS:    fields.STATUS,
}


def kind_of(kind: Union[str, Kind]) -> Kind:
    """Return the :class:`Kind` for a symbolic name, raising
    :class:`UnknownKind` if there is none.
    """

    if isinstance(kind, Kind):
        return kind

    try:
        return Kind(kind)
    except ValueError:
        raise UnknownKind('invalid message kind: ' + repr(kind)) from None


def layout(kind: Union[str, Kind], payload: str, platform: str, id: str = '') -> Tuple[Union[Byte, Text], ...]:
    """Return the tagged frame values for a message of the requested kind,
    prior to serialization.
    """

    kind = kind_of(kind)

    if kind in INFO_KINDS:
        return (
            Text(),
            Byte(fields.PLATFORM_INFO),
            Text(platform),
            Text(id),
            Text(payload),
            Text(kind.value),
        )

    try:
        code = BARE_KINDS[kind]
    except KeyError:
        raise UnknownKind('no frame layout for message kind: ' + repr(kind.value)) from None

    return (Text(), Byte(code), Text())


def compose(kind: Union[str, Kind], payload: str, platform: str, id: str = '') -> Tuple[bytes, ...]:
    """Encode a message as the tuple of frames to put on the wire."""

    frames = tuple(value.encode() for value in layout(kind, payload, platform, id))
    logger.debug("composed %s message, %d frames", kind_of(kind).value, len(frames))
    return frames


def _as_text(frame: Union[str, bytes, bytearray, memoryview]) -> str:

    if isinstance(frame, str):
        return frame

    return Text.decode(frame)


def extract(frames: Sequence[Union[str, bytes, bytearray, memoryview]]) -> str:
    """Return the payload carried by a received message.

    For PLATFORM_INFO messages this is frame 4, with any escaped commas
    restored; for everything else it is frame 3. A sequence that is too
    short to hold the addressed frame raises :class:`MalformedMessage`.
    """

    if len(frames) <= fields.TYPE:
        raise MalformedMessage('message has no type frame: %d frames' % (len(frames)))

    type_frame = _as_text(frames[fields.TYPE])
    if type_frame == '':
        raise MalformedMessage('message type frame is empty')

    code = ord(type_frame[0])

    if code == fields.PLATFORM_INFO:
        index = fields.INFO
    else:
        index = fields.KIQ_DATA

    if len(frames) <= index:
        raise MalformedMessage(
            'message type 0x%02x needs frame %d, only %d frames present' % (code, index, len(frames))
        )

    payload = _as_text(frames[index])

    if code == fields.PLATFORM_INFO:
        payload = payload.replace(fields.COMMA_ESCAPE, ',')

    logger.debug("extracted %d characters from message type 0x%02x", len(payload), code)
    return payload


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
