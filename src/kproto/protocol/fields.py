"""Protocol constants.

Keep these in one place to avoid magic numbers in message handling.

Every message is a multipart sequence::

    empty, type, data...

where *type* is a single raw byte holding one of the codes below.
"""

OK = 0x00
KEEPALIVE = 0x01
KIQ_MESSAGE = 0x02
PLATFORM = 0x03
PLATFORM_ERROR = 0x04
PLATFORM_REQUEST = 0x05
PLATFORM_INFO = 0x06
FAIL = 0x07
STATUS = 0x08
TASK = 0x09

NAMES = {
    OK:                 'IPC_OK_TYPE',
    KEEPALIVE:          'IPC_KEEPALIVE_TYPE',
    KIQ_MESSAGE:        'IPC_KIQ_MESSAGE',
    PLATFORM:           'IPC_PLATFORM_TYPE',
    PLATFORM_ERROR:     'IPC_PLATFORM_ERROR',
    PLATFORM_REQUEST:   'IPC_PLATFORM_REQUEST',
    PLATFORM_INFO:      'IPC_PLATFORM_INFO',
    FAIL:               'IPC_FAIL_TYPE',
    STATUS:             'IPC_STATUS',
    TASK:               'IPC_TASK_TYPE',
}

VALUES = dict((name, code) for code, name in NAMES.items())


# Frame positions. Several names share a position; which one applies depends
# on the message type.

EMPTY = 0
TYPE = 1
PLATFORM_NAME = 2
ID = 3
INFO = 4
INFO_TYPE = 5
USER = 4
DATA = 5
URLS = 6
REQ_ARGS = 6
REPOST = 7
ARGS = 8
CMD = 9
TIME = 10
KIQ_DATA = 3
ERROR = 5
DESCRIPT = 4
TASK_TYPE = 5
TECH = 6
LOGS = 7


# Commas inside PLATFORM_INFO payloads arrive percent-encoded.

COMMA_ESCAPE = '%2C'

KIQ_NAME = 'KIQ'


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
