""" In-memory representations of the requests carried through the XDN
    request pipeline. These classes know nothing about the wire format;
    see :mod:`xdn.protocol.codec` for the translation to and from strings.
"""

import itertools
import logging
import os
import threading
import time as timemodule

from . import packet
from . import service

logger = logging.getLogger(__name__)


class HttpRequest:
    """ A client-facing HTTP request, as received by an XDN entry point.
        The fields are those of the HTTP request line, the headers, and
        the body:

        :ivar protocol_version: The HTTP version string, such as 'HTTP/1.1'.
        :ivar method: The HTTP method, such as 'GET' or 'POST'.
        :ivar uri: The request target, including any query string.
        :ivar headers: A tuple of (key, value) tuples, in the order received;
            the same key may appear more than once.
        :ivar body: The request body as bytes; None is equivalent to an
            empty body. Both are immutable, so the hash of a request only
            changes if one of its fields is reassigned.
        :ivar packet_type: The :class:`packet.PacketType` this request is
            carried as; either a service request or a forwarded request.
        :ivar request_id: A locally generated identifier. It is not part of
            the serialized form, and a decoded request will have a new one.
        :ivar response: The response to this request, once one is attached
            via :func:`complete`.
    """

    needs_coordination = False

    def __init__(self, method, uri, headers=(), body=None, protocol_version='HTTP/1.1', packet_type=packet.SERVICE_HTTP_REQUEST):

        try:
            headers = headers.items()
        except AttributeError:
            pass

        self.protocol_version = protocol_version
        self.method = method
        self.uri = uri
        self.headers = tuple((str(key), str(value)) for key,value in headers)

        # Take a private copy; the caller may reuse its buffer.

        if body is None:
            self.body = None
        else:
            self.body = bytes(body)

        self.packet_type = packet_type
        self.request_id = next_id()

        self.response = None
        self.rep_event = threading.Event()


    def __eq__(self, other):

        if self is other:
            return True
        if not isinstance(other, HttpRequest):
            return NotImplemented

        return self._identity() == other._identity()


    def __hash__(self):
        return hash(self._identity())


    def __repr__(self):
        return '%s(%r, %r, %d headers, %d byte body)' % (self.packet_type.kind, self.method, self.uri, len(self.headers), len(self.content))


    def _identity(self):
        """ The fields that participate in equality. The response and the
            request id are deliberately excluded: neither survives a trip
            through the wire format.
        """

        return (self.protocol_version, self.method, self.uri, self.headers, self.content)


    @property
    def content(self):
        """ The body as bytes, never None.
        """

        body = self.body
        if body is None:
            return b''
        return body


    @property
    def service_name(self):
        """ The name of the XDN service this request is intended for, always
            derived from the current headers.
        """

        return service.resolve(self.headers)


    def header(self, name):
        """ Return the first value for the header *name*, or None.
        """

        return service.header(self.headers, name)


    def complete(self, response):
        """ Attach the *response* to this request and signal any callers
            blocking via :func:`wait` to proceed.
        """

        self.response = response
        self.rep_event.set()


    def poll(self):
        """ Return True if a response has been attached, otherwise False.
        """

        return self.rep_event.is_set()


    def wait(self, timeout=60):
        """ Block until a response has been attached. The response is always
            returned; it will be None if the request is still pending after
            *timeout* seconds.
        """

        self.rep_event.wait(timeout)
        return self.response


# end of class HttpRequest



class StatediffApplyRequest:
    """ An internal request instructing each replica of a service to apply
        a state transition. Unlike :class:`HttpRequest`, the *request_id*
        travels with the serialized request, since every replica has to
        agree on the identifier associated with a given statediff.

        :ivar service_name: The name of the XDN service being updated.
        :ivar statediff: The opaque, application-produced diff, as bytes.
        :ivar request_id: The identifier for this state transition; one is
            generated if not supplied.
    """

    needs_coordination = True
    packet_type = packet.STATEDIFF_APPLY_REQUEST

    def __init__(self, service_name, statediff, request_id=None):

        try:
            statediff = statediff.encode('utf-8')
        except AttributeError:
            # Assume it is already bytes.
            statediff = bytes(statediff)

        if request_id is None:
            request_id = next_id()

        self.service_name = service_name
        self.statediff = statediff
        self.request_id = int(request_id)


    def __eq__(self, other):

        if self is other:
            return True
        if not isinstance(other, StatediffApplyRequest):
            return NotImplemented

        return self._identity() == other._identity()


    def __hash__(self):
        return hash(self._identity())


    def __repr__(self):
        return '%s(%r, %d byte statediff, id=%d)' % (self.packet_type.kind, self.service_name, len(self.statediff), self.request_id)


    def _identity(self):
        return (self.service_name, self.statediff, self.request_id)


# end of class StatediffApplyRequest



_id_min = 0
_id_max = 0xFFFFFFFF
_id_lock = threading.Lock()
_id_ticker = itertools.count(_id_min)


def _id_clock():
    """ Return the current time as integer milliseconds since the epoch.
    """

    return int(timemodule.time() * 1000)



def _id_counter():
    """ Return the next value from a process-wide counter, wrapping back to
        zero after the 32-bit maximum.
    """

    global _id_ticker
    _id_lock.acquire()
    id = next(_id_ticker)

    if id >= _id_max:
        _id_ticker = itertools.count(_id_min)

        if id > _id_max:
            # This shouldn't happen, but here we are...
            id = next(_id_ticker)

    _id_lock.release()
    return id


strategies = dict()
strategies['clock'] = _id_clock
strategies['counter'] = _id_counter

_generator = _id_clock


def strategy(name):
    """ Select the named strategy for generating request identifiers; either
        'clock', the default, or 'counter'. Raises ValueError for any other
        *name*.
    """

    global _generator

    try:
        generator = strategies[name]
    except KeyError:
        raise ValueError('unknown request id strategy: ' + repr(name))

    _generator = generator



def next_id():
    """ Return a new request identifier from the selected strategy. This
        never touches the filesystem and never raises.
    """

    return _generator()


# The environment is consulted exactly once, at import time. A bad value
# leaves the clock strategy in place rather than breaking every import.

try:
    strategy(os.environ.get('XDN_REQUEST_ID', 'clock'))
except ValueError as e:
    logger.warning("%s, using 'clock'", e)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
