"""
XDN Request Protocol
====================

This package defines how requests travelling through the XDN replicated
request pipeline are represented in memory and serialized as strings.
It does not send, schedule, or execute anything; the transport, the
replication layer, and the application runtime all sit outside it and
only see the in-memory request objects or their serialized strings.

---------------------------------------------------------------------

Layer Overview
--------------

Envelope (envelope.py)
    Entry point for serialized strings
    - decode() / inspect() / encode()
    Routes by the packet code in the 'xdn:<code>:' prefix

    │
    ▼
Codecs (codec.py)
    One codec per packet type
    - HTTP request payload shape
    - Statediff apply payload shape
    Prefix handling, JSON, field validation

    │
    ▼
Request Model (message.py)
    In-memory requests
    - HttpRequest
    - StatediffApplyRequest
    Identifier generation

    │
    ▼
Packet Types (packet.py), Service Names (service.py)
    Registry of packet codes, checked once at import
    Service name derived from request headers

    │
    ▼
Field Vocabulary (fields.py)
    Canonical names for the wire format

---------------------------------------------------------------------
"""

from . import fields
from . import packet
from . import service
from . import message
from . import codec
from . import envelope

from .packet import PacketType, RegistryConflict
from .message import HttpRequest, StatediffApplyRequest
from .codec import MalformedRequest

decode = envelope.decode
encode = envelope.encode
inspect = envelope.inspect


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
