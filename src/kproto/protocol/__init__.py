from . import errors
from . import fields
from . import frames
from . import codec
from . import commands
from . import message
from . import factory

from .codec import Kind, compose, extract
from .message import Message
from .factory import deserialize
from .errors import ProtocolError, UnknownKind, MalformedMessage, UnknownType


"""
kproto Protocol Layer
=====================

This package defines the messages exchanged between a host application and
a platform component. It knows how messages are laid out as frames, and
nothing about how frames are moved.

The protocol layer MUST NOT depend on any transport implementation
(e.g. ZeroMQ).

---------------------------------------------------------------------

Layer Overview
--------------

Codec (codec.py)
    Kind-driven composition and payload extraction
    - compose()
    - extract()

    │
    ▼
Message Model (message.py, factory.py)
    One class per type code
    - field access by name
    - deserialize() from received frames

    │
    ▼
Frame Values (frames.py)
    Byte / Text / Flag / Word
    How a single frame goes on the wire

    │
    ▼
Field Vocabulary (fields.py, commands.py)
    Type codes, frame positions, command codes

---------------------------------------------------------------------

Wire Format
-----------

    frame 0     empty
    frame 1     type code, one raw byte
    frame 2...  fields, fixed by the type code

---------------------------------------------------------------------
"""


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
