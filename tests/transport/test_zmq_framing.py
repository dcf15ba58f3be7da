import kproto
import pytest
import zmq

from kproto.protocol import message
from kproto.transport.zmq import framing


def test_to_multipart():

    okay = message.Okay('web', 'req-1')
    assert framing.to_multipart(okay) == (b'', b'\x00', b'web', b'req-1')

    composed = kproto.compose('ok', '', 'web')
    assert framing.to_multipart(composed) == composed
    assert framing.to_multipart(list(composed)) == composed


def test_normalize():

    parts = [zmq.Frame(b''), bytearray(b'\x06'), memoryview(b'web'), 'req-1', b'x']
    assert framing.normalize(parts) == (b'', b'\x06', b'web', b'req-1', b'x')


def test_from_multipart_frames():

    error = message.PlatformError('web', '1', 'user', 'it broke')
    parts = [zmq.Frame(part) for part in error.frames()]

    parsed = framing.from_multipart(parts)
    assert isinstance(parsed, message.PlatformError)
    assert parsed.error == 'it broke'


def test_from_multipart_unknown():

    parts = [zmq.Frame(b''), zmq.Frame(b'\x42')]

    with pytest.raises(kproto.protocol.UnknownType):
        framing.from_multipart(parts)

    raw = framing.from_multipart(parts, no_fail=True)
    assert raw.frames() == (b'', b'\x42')


def test_extract_multipart():

    composed = kproto.compose('info', 'one, two', 'web', 'req-1')
    parts = [zmq.Frame(part) for part in composed]
    assert framing.extract_multipart(parts) == 'one, two'

    with pytest.raises(kproto.protocol.MalformedMessage):
        framing.extract_multipart([zmq.Frame(b''), zmq.Frame(b'\x00'), zmq.Frame(b'')])
