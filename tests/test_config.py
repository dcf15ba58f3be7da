import logging

import kproto
import pytest


def test_defaults():
    assert kproto.config.log_level() == logging.WARNING
    assert kproto.config.no_fail() is False


def test_log_level(monkeypatch):

    monkeypatch.setenv('KPROTO_LOG_LEVEL', 'debug')
    assert kproto.config.log_level() == logging.DEBUG

    monkeypatch.setenv('KPROTO_LOG_LEVEL', 'chatty')
    with pytest.raises(ValueError):
        kproto.config.log_level()


def test_apply(monkeypatch):

    logger = logging.getLogger('kproto')
    original = logger.level

    monkeypatch.setenv('KPROTO_LOG_LEVEL', 'ERROR')

    try:
        kproto.config.apply()
        assert logger.level == logging.ERROR
    finally:
        logger.setLevel(original)


def test_no_fail(monkeypatch):

    for value in ('1', 'true', 'Yes', ' on '):
        monkeypatch.setenv('KPROTO_NO_FAIL', value)
        assert kproto.config.no_fail() is True

    for value in ('0', 'false', 'no', ''):
        monkeypatch.setenv('KPROTO_NO_FAIL', value)
        assert kproto.config.no_fail() is False


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
