from . import framing
