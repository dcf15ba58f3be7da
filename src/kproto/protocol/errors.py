"""Protocol exceptions.

Everything raised on purpose by :mod:`kproto.protocol` derives from
:class:`ProtocolError`. The concrete classes also derive from
:class:`ValueError`, since in every case it is the caller's input that is
wrong.
"""


class ProtocolError(Exception):
    """Base class for all kproto protocol errors."""


class UnknownKind(ProtocolError, ValueError):
    """A message kind was requested that has no frame layout."""


class MalformedMessage(ProtocolError, ValueError):
    """A received frame sequence does not have the expected shape."""


class UnknownType(MalformedMessage):
    """A received frame sequence carries an unrecognized type code."""


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
