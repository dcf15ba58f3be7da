""" Python implementation of kproto, the framing used between a host
    application and its platform components. This includes composing and
    extracting the short kind-driven messages, and a typed model of every
    message type for applications that need the individual fields.
"""

import logging

# Utility components.

from . import config

logging.getLogger(__name__).addHandler(logging.NullHandler())
config.apply()

# Submodules used by multiple other components.

from . import protocol
from . import transport

# Primary public-facing interfaces.

compose = protocol.codec.compose
extract = protocol.codec.extract
deserialize = protocol.factory.deserialize

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
