import pytest


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):

    # Settings are read from the environment at the time of use; make sure
    # whatever the calling shell has set does not leak into the tests.

    monkeypatch.delenv('KPROTO_LOG_LEVEL', raising=False)
    monkeypatch.delenv('KPROTO_NO_FAIL', raising=False)


@pytest.fixture
def info_frames():
    """ A PLATFORM_INFO frame sequence as received, already decoded to text.
    """

    return ['', '\x06', 'web', 'req-1', 'a%2Cb%2Cc', 'loadurl']


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
