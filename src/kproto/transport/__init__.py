"""Transport adapters.

Nothing here opens a socket; an adapter only converts between kproto
messages and the frame objects a transport library sends and receives.
"""

from .zmq import framing
