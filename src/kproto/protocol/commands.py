""" Command codes carried inside messages. A :class:`PlatformCommand` code
    travels in the *cmd* frame of a platform message; a :class:`RequestType`
    is the first byte of a request to the host application.
"""

import enum


class PlatformCommand(enum.IntEnum):
    MESSAGE = 0x00
    POLL = 0x01
    POLL_STOP = 0x02
    POLL_RESULT = 0x03
    UNKNOWN = 0x04


REQUEST_MESSAGE = 'message'
REQUEST_CREATE_POLL = 'poll'
REQUEST_SCHEDULE_POLL_STOP = 'poll stop'
REQUEST_PROCESS_POLL_RESULT = 'poll result'
REQUEST_PROCESS_ROOMS = 'process rooms'
REQUEST_GENERATE_AI = 'generate'

CODES = {
    REQUEST_MESSAGE:                PlatformCommand.MESSAGE,
    REQUEST_CREATE_POLL:            PlatformCommand.POLL,
    REQUEST_SCHEDULE_POLL_STOP:     PlatformCommand.POLL_STOP,
    REQUEST_PROCESS_POLL_RESULT:    PlatformCommand.POLL_RESULT,
}


def command(text):
    """ Return the :class:`PlatformCommand` for a request string. Raises
        KeyError if the string has no command code.
    """

    return CODES[text]


def command_code(text):
    """ Like :func:`command`, but return :attr:`PlatformCommand.UNKNOWN`
        instead of raising for an unmapped string.
    """

    return CODES.get(text, PlatformCommand.UNKNOWN)


# Platform command strings, indexed by the constants below.

TELEGRAM = 0x00
MASTODON = 0x01
DISCORD = 0x02
YOUTUBE = 0x03
NO_COMMAND = 0x04

COMMANDS = (
    'telegram:messages',
    'mastodon:comments',
    'discord:messages',
    'youtube:livestream',
    'no:command',
)


class RequestType(enum.IntEnum):
    REGISTER_APPLICATION = 0x00
    UPDATE_APPLICATION = 0x01
    REMOVE_APPLICATION = 0x02
    GET_APPLICATION = 0x03
    FETCH_SCHEDULE = 0x04
    UPDATE_SCHEDULE = 0x05
    FETCH_SCHEDULE_TOKENS = 0x06
    TRIGGER_CREATE = 0x07
    TASK_FLAGS = 0x08
    FETCH_FILE = 0x09
    FETCH_FILE_ACK = 0x0A
    FETCH_FILE_READY = 0x0B
    FETCH_TASK_DATA = 0x0C
    START_SESSION = 0x0D
    STOP_SESSION = 0x0E
    EXECUTE_PROCESS = 0x0F
    UPLOAD_FILE = 0x10
    SCHEDULE_TASK = 0x11
    IPC_REQUEST = 0x12
    FETCH_TERM_HITS = 0x13
    EXECUTE = 0x14
    FETCH_POSTS = 0x15
    UPDATE_POST = 0x16
    KIQ_STATUS = 0x17
    CONVERT_TASK = 0x18
    REPOST_PLATFORM = 0x19
    RECONNECT_IPC = 0x1A
    KAI_TASK = 0x1B
    UNKNOWN = 0x1C


def request_type(byte):
    """ Return the :class:`RequestType` for an integer byte value, or
        :attr:`RequestType.UNKNOWN` if it does not map to one.
    """

    try:
        return RequestType(byte)
    except ValueError:
        return RequestType.UNKNOWN


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
