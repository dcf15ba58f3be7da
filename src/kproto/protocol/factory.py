"""Build typed messages from received frame sequences."""

from __future__ import annotations

import logging
from typing import Optional, Sequence, Union

from .. import config
from . import fields
from .errors import MalformedMessage, UnknownType
from .frames import Byte
from .message import (
    Fail,
    KeepAlive,
    KiqMessage,
    Message,
    Okay,
    PlatformError,
    PlatformInfo,
    PlatformMessage,
    PlatformRequest,
    StatusCheck,
    Task,
)

logger = logging.getLogger(__name__)


CLASSES = dict((cls.code, cls) for cls in (
    Okay,
    KeepAlive,
    KiqMessage,
    PlatformMessage,
    PlatformError,
    PlatformRequest,
    PlatformInfo,
    Fail,
    StatusCheck,
    Task,
))


def deserialize(parts: Sequence[bytes], no_fail: Optional[bool] = None) -> Message:
    """Return the typed message for a received frame sequence.

    An unrecognized type code raises :class:`UnknownType`, unless *no_fail*
    is true, in which case a bare :class:`Message` holding every frame is
    returned instead. If *no_fail* is None the default comes from
    :func:`kproto.config.no_fail`.
    """

    if len(parts) <= fields.TYPE:
        raise MalformedMessage('message has no type frame: %d frames' % (len(parts)))

    code = Byte.decode(parts[fields.TYPE])

    try:
        cls = CLASSES[code]
    except KeyError:
        if no_fail is None:
            no_fail = config.no_fail()

        if not no_fail:
            raise UnknownType('unknown message type: 0x%02x' % (code)) from None

        logger.warning("unknown message type 0x%02x, keeping %d raw frames", code, len(parts))
        return Message.from_parts(parts)

    message = cls.from_parts(parts)
    logger.debug("deserialized %s", message.name)
    return message


def is_keepalive(thing: Union[int, Message]) -> bool:
    """Return True if *thing*, a type code or a message, is a keepalive."""

    if isinstance(thing, Message):
        thing = thing.type
    return thing == fields.KEEPALIVE


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
