import pytest

from kproto.protocol.errors import MalformedMessage
from kproto.protocol.frames import Byte, Flag, Text, Word


def test_text():
    assert Text('plätform').encode() == b'pl\xc3\xa4tform'
    assert Text.decode(b'pl\xc3\xa4tform') == 'plätform'
    assert Text().encode() == b''

    with pytest.raises(MalformedMessage):
        Text.decode(b'\xff\xfe')


def test_byte():
    assert Byte(0x06).encode() == b'\x06'
    assert Byte.decode(b'\x06') == 6

    for bad in (-1, 256):
        with pytest.raises(ValueError):
            Byte(bad)

    with pytest.raises(MalformedMessage):
        Byte.decode(b'')


def test_flag():
    assert Flag(True).encode() == b'\x01'
    assert Flag(False).encode() == b'\x00'
    assert Flag.decode(b'\x01') is True
    assert Flag.decode(b'\x00') is False


def test_word():
    assert Word(0x01020304).encode() == b'\x01\x02\x03\x04'
    assert Word(3).encode() == b'\x00\x00\x00\x03'
    assert Word.decode(b'\x00\x00\x01\x00') == 256

    with pytest.raises(ValueError):
        Word(0x100000000)

    with pytest.raises(MalformedMessage):
        Word.decode(b'\x00\x01')


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
