""" Python implementation of the XDN request layer: the packet types, the
    in-memory request objects, and the string serialization used to carry
    HTTP requests and statediff updates through a replicated request
    pipeline.
"""

# Utility components.

from . import json

# Primary public-facing interfaces.

from . import protocol

from .protocol import HttpRequest, StatediffApplyRequest
from .protocol import MalformedRequest, RegistryConflict

decode = protocol.decode
encode = protocol.encode
inspect = protocol.inspect

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
