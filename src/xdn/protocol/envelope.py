""" Top-level entry points for serializing and deserializing any XDN
    request. Incoming strings are routed to the appropriate codec by the
    packet code embedded in their prefix; strings that are not XDN requests
    at all, or that name a packet code with no codec, are not ours and are
    left for the surrounding framework to handle.
"""

import collections
import logging

from . import codec
from . import fields
from . import packet

logger = logging.getLogger(__name__)


# The codec class for each kind of request; every kind in the packet type
# registry must appear here.

handlers = dict()
handlers[packet.SERVICE_HTTP_REQUEST.kind] = codec.HttpRequestCodec
handlers[packet.FORWARD_HTTP_REQUEST.kind] = codec.HttpRequestCodec
handlers[packet.STATEDIFF_APPLY_REQUEST.kind] = codec.StatediffApplyCodec


def build(registry):
    """ Return a dictionary mapping each packet code in the *registry* to a
        codec instance for that packet type. A registered kind without a
        codec class in :data:`handlers` raises RuntimeError, the same as a
        conflict in the registry itself.
    """

    built = dict()

    for packet_type in registry:
        try:
            handler = handlers[packet_type.kind]
        except KeyError:
            raise RuntimeError("no codec for registered packet type " + repr(packet_type))

        built[packet_type.code] = handler(packet_type)

    return built


codecs = build(packet.registry)


Decoded = collections.namedtuple('Decoded', ('status', 'request', 'error'))
Decoded.__doc__ = """ The outcome of :func:`inspect`. The *status* is one of
    fields.NOT_OURS, fields.MALFORMED, or fields.OK; *request* is populated
    only for fields.OK, and *error* only for fields.MALFORMED.
"""



def packet_code(serialized):
    """ Return the integer packet code embedded in the *serialized* string,
        or None if the string does not have the form 'xdn:<digits>:...'.
    """

    if not isinstance(serialized, str) or not serialized.startswith(fields.PREFIX):
        return None

    start = len(fields.PREFIX)
    end = serialized.find(fields.SEPARATOR, start)

    if end == -1:
        return None

    digits = serialized[start:end]

    # str.isdecimal() accepts non-ASCII digits, which int() would then happily
    # convert; only plain decimal digits are permitted here.

    if digits == '' or not digits.isascii() or not digits.isdecimal():
        return None

    return int(digits)



def select(serialized):
    """ Return the :class:`codec.Codec` that handles the *serialized* string,
        or None if the string is not ours.
    """

    code = packet_code(serialized)

    if code is None:
        return None

    packet_type = packet.get(code)

    if packet_type is None:
        return None

    return codecs[packet_type.code]



def decode(serialized):
    """ Return the request represented by the *serialized* string. Returns
        None if the string is not an XDN request with a known packet code;
        raises :class:`codec.MalformedRequest` if the prefix is recognized
        but the payload cannot be decoded.
    """

    selected = select(serialized)

    if selected is None:
        logger.debug("not an XDN request: %.40r", serialized)
        return None

    try:
        return selected.decode(serialized)
    except codec.MalformedRequest as e:
        logger.warning("rejecting %s", e)
        raise



def inspect(serialized):
    """ Decode the *serialized* string and report the outcome as a
        :class:`Decoded` tuple instead of raising an exception.
    """

    try:
        request = decode(serialized)
    except codec.MalformedRequest as e:
        return Decoded(fields.MALFORMED, None, e)

    if request is None:
        return Decoded(fields.NOT_OURS, None, None)

    return Decoded(fields.OK, request, None)



def encode(request):
    """ Return the serialized string form of *request*, using the codec for
        its packet type.
    """

    packet_type = request.packet_type

    if packet.get(packet_type.code) != packet_type:
        raise ValueError('not a registered packet type: ' + repr(packet_type))

    selected = codecs[packet_type.code]

    return selected.encode(request)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
