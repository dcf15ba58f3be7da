""" A class representation of a kproto message, including subclasses for
    each message type.
"""

from . import fields
from .errors import MalformedMessage
from .frames import Byte, Flag, Text, Word


class Message:
    """ The :class:`Message` provides a very thin encapsulation of what it
        means to be a message in a kproto context. Subclasses declare the
        type *code* that goes in the second frame, and a *layout* naming
        each remaining frame in wire order along with the
        :mod:`kproto.protocol.frames` class that serializes it.

        Field values can be passed positionally, in wire order, or by
        keyword; any field left out takes the default for its frame class,
        or the value in the class-level *defaults* dictionary if one is
        present there.

        A bare :class:`Message` has no code and no layout; it is only used
        as a container for a received frame sequence whose type is not
        recognized, and holds those frames verbatim in *parts*.

        :ivar parts: Verbatim frames for an unrecognized message, else None.
    """

    code = None
    layout = ()
    defaults = {}

    # Text fields that get shortened in the human-readable summary.
    truncate = ()
    truncate_length = 120

    def __init__(self, *args, **kwargs):

        layout = self.layout

        if len(args) > len(layout):
            raise TypeError('%s takes at most %d field values, %d given' % (type(self).__name__, len(layout), len(args)))

        values = dict()

        for (name, kind), value in zip(layout, args):
            values[name] = value

        names = set(name for name, kind in layout)

        for name, value in kwargs.items():
            if name not in names:
                raise TypeError('%s has no field %r' % (type(self).__name__, name))
            if name in values:
                raise TypeError('%s got multiple values for field %r' % (type(self).__name__, name))
            values[name] = value

        for name, kind in layout:
            try:
                value = values[name]
            except KeyError:
                value = self.defaults.get(name, kind.default)

            setattr(self, name, value)

        self.parts = None


    def __iter__(self):
        return iter(self.frames())


    def __repr__(self):
        if self.code is None and self.parts is None:
            return '<%s: no frames>' % (type(self).__name__)
        return repr(self.frames())


    def __str__(self):

        summary = list()
        summary.append('(Type):' + self.name)

        for name, kind in self.layout:
            value = getattr(self, name)

            if name in self.truncate and len(value) > self.truncate_length:
                value = value[:self.truncate_length]

            label = name.replace('_', ' ').title()
            summary.append('(%s):%s' % (label, value))

        return ','.join(summary)


    def __eq__(self, other):
        if not isinstance(other, Message):
            return NotImplemented
        return type(self) is type(other) and self.frames() == other.frames()


    @classmethod
    def from_parts(cls, parts):
        """ Build an instance from a received frame sequence. Only the frames
            named in the layout are read; anything beyond them is ignored.
            A bare :class:`Message` keeps every frame as-is.
        """

        if cls.code is None:
            if len(parts) <= fields.TYPE:
                raise MalformedMessage('message has no type frame: %d frames' % (len(parts)))

            message = cls()
            message.parts = tuple(bytes(part) for part in parts)
            return message

        expected = fields.TYPE + 1 + len(cls.layout)

        if len(parts) < expected:
            raise MalformedMessage('%s needs %d frames, got %d' % (cls.__name__, expected, len(parts)))

        code = Byte.decode(parts[fields.TYPE])
        if code != cls.code:
            raise MalformedMessage('%s expects type 0x%02x, got 0x%02x' % (cls.__name__, cls.code, code))

        values = dict()
        index = fields.TYPE + 1

        for name, kind in cls.layout:
            values[name] = kind.decode(parts[index])
            index += 1

        return cls(**values)


    def frames(self):
        """ Return the tuple of byte frames that represents this message on
            the wire.
        """

        if self.code is None:
            if self.parts is None:
                raise RuntimeError('messages must have a type code to be put on the wire')
            return self.parts

        parts = [b'', Byte(self.code).encode()]

        for name, kind in self.layout:
            parts.append(kind(getattr(self, name)).encode())

        return tuple(parts)


    @property
    def type(self):
        """ The numeric type code of this message.
        """

        if self.code is None:
            return Byte.decode(self.frames()[fields.TYPE])
        return self.code


    @property
    def name(self):
        """ The display name of the type code, such as 'IPC_OK_TYPE'.
        """

        code = self.type

        try:
            return fields.NAMES[code]
        except KeyError:
            return 'UNKNOWN(0x%02x)' % (code)


    def values(self):
        """ Return the field values as a dictionary, in wire order.
        """

        return dict((name, getattr(self, name)) for name, kind in self.layout)


# end of class Message



class Okay(Message):
    """ Positive acknowledgement, optionally tied to a platform and request.
    """

    code = fields.OK
    layout = (('platform', Text), ('id', Text))


class Fail(Message):
    """ Negative acknowledgement, optionally tied to a platform and request.
    """

    code = fields.FAIL
    layout = (('platform', Text), ('id', Text))


class KeepAlive(Message):
    code = fields.KEEPALIVE


class StatusCheck(Message):
    code = fields.STATUS


class KiqMessage(Message):
    """ Free-form payload addressed to or from the host application.
    """

    code = fields.KIQ_MESSAGE
    layout = (('platform', Text), ('payload', Text))


class PlatformMessage(Message):
    """ A post relayed through a platform. The *repost* flag is a single
        byte; *cmd* is one of the :class:`kproto.protocol.commands.PlatformCommand`
        codes, carried as a big-endian 32-bit integer.
    """

    code = fields.PLATFORM
    layout = (
        ('platform', Text),
        ('id', Text),
        ('user', Text),
        ('content', Text),
        ('urls', Text),
        ('repost', Flag),
        ('args', Text),
        ('cmd', Word),
        ('time', Text),
    )
    truncate = ('content',)


class PlatformRequest(Message):
    code = fields.PLATFORM_REQUEST
    layout = (
        ('platform', Text),
        ('id', Text),
        ('user', Text),
        ('content', Text),
        ('args', Text),
    )
    truncate = ('content',)


class PlatformInfo(Message):
    """ Information reported by a platform. The *info_type* field names
        what kind of information it is, for example 'loadurl'.
    """

    code = fields.PLATFORM_INFO
    layout = (
        ('platform', Text),
        ('id', Text),
        ('info', Text),
        ('info_type', Text),
    )

    def payload(self):
        """ Return the *info* field with escaped commas restored.
        """

        return self.info.replace(fields.COMMA_ESCAPE, ',')


class PlatformError(Message):
    code = fields.PLATFORM_ERROR
    layout = (
        ('platform', Text),
        ('id', Text),
        ('user', Text),
        ('error', Text),
    )


class Task(Message):
    """ A unit of work for the host application. The platform frame is
        always the host's own name unless overridden.
    """

    code = fields.TASK
    layout = (
        ('platform', Text),
        ('id', Text),
        ('description', Text),
        ('task_type', Text),
        ('tech', Text),
        ('logs', Text),
    )
    defaults = {'platform': fields.KIQ_NAME}


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
