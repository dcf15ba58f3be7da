""" Runtime settings for kproto. There is no configuration file; everything
    is drawn from environment variables, read at the time of use so that
    changes made after import still take effect.

    ``KPROTO_LOG_LEVEL``
        Level name for the ``kproto`` logger, such as DEBUG or WARNING.
        The default is WARNING.

    ``KPROTO_NO_FAIL``
        If set to a true value (1, true, yes, on), messages with an
        unrecognized type code are kept as raw frames rather than rejected.
"""

import logging
import os


default_log_level = 'WARNING'
true_values = set(('1', 'true', 'yes', 'on'))

logger = logging.getLogger('kproto')


def log_level():
    """ Return the numeric logging level requested via ``KPROTO_LOG_LEVEL``.
        An unrecognized level name raises ValueError.
    """

    name = os.environ.get('KPROTO_LOG_LEVEL', default_log_level)
    name = name.strip().upper()

    level = logging.getLevelName(name)

    if isinstance(level, int):
        return level

    raise ValueError('KPROTO_LOG_LEVEL is not a logging level: ' + repr(name))


def no_fail():
    """ Return True if ``KPROTO_NO_FAIL`` is set to a true value.
    """

    value = os.environ.get('KPROTO_NO_FAIL', '')
    return value.strip().lower() in true_values


def apply():
    """ Set the level of the ``kproto`` logger from the environment. This is
        invoked once at import; call it again after changing the environment.
    """

    logger.setLevel(log_level())


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
