""" Translation between in-memory requests and their serialized form. Every
    serialized request is a single string::

        xdn:<packet code>:<JSON object>

    The :class:`Codec` base class handles the prefix and the JSON encoding;
    subclasses define the payload shape for a family of packet types. One
    codec instance exists per packet type, so the HTTP payload shape is
    shared between service requests and forwarded requests.

    Decoding has two distinct failure modes. A string that does not carry
    this codec's prefix is simply not ours, and :func:`Codec.decode` returns
    None. A string that does carry the prefix, but whose payload cannot be
    interpreted, raises :class:`MalformedRequest`.
"""

from .. import json
from . import fields
from . import message


class MalformedRequest(ValueError):
    """ Raised when a serialized request has a recognized prefix but its
        payload cannot be decoded.

        :ivar packet_type: The :class:`packet.PacketType` named by the prefix.
        :ivar reason: A short description of what was wrong.
    """

    def __init__(self, packet_type, reason):
        self.packet_type = packet_type
        self.reason = reason

        text = 'malformed %s payload: %s' % (packet_type.kind, reason)
        ValueError.__init__(self, text)


# end of class MalformedRequest



class Codec:
    """ Encode and decode requests of a single *packet_type*.

        :ivar prefix: The exact string every serialized request of this
            packet type begins with, such as 'xdn:31300:'.
    """

    def __init__(self, packet_type):

        self.packet_type = packet_type
        self.prefix = prefix(packet_type)


    def __repr__(self):
        return '%s(%s)' % (self.__class__.__name__, self.packet_type.kind)


    def encode(self, request):
        """ Return the serialized string form of *request*.
        """

        payload = self.pack(request)
        payload = json.dumps(payload)
        return self.prefix + payload.decode('utf-8')


    def decode(self, serialized):
        """ Return the request encoded in the *serialized* string. Returns
            None if the string does not begin with this codec's prefix;
            raises :class:`MalformedRequest` if it does, but the remainder
            is not a valid payload.
        """

        if serialized is None or not serialized.startswith(self.prefix):
            return None

        payload = serialized[len(self.prefix):]

        try:
            payload = json.loads(payload)
        except json.DecodeError as e:
            raise MalformedRequest(self.packet_type, 'invalid JSON: ' + str(e)) from e

        if not isinstance(payload, dict):
            raise MalformedRequest(self.packet_type, 'payload is not a JSON object')

        return self.unpack(payload)


    def field(self, payload, name, expected):
        """ Return the required field *name* from the decoded *payload*,
            confirming it is an instance of the *expected* type.
        """

        try:
            value = payload[name]
        except KeyError:
            raise MalformedRequest(self.packet_type, 'missing field ' + repr(name))

        # JSON booleans decode as bool, which is also an int; never accept
        # one in place of a number.

        if isinstance(value, bool) and expected is not bool:
            valid = False
        else:
            valid = isinstance(value, expected)

        if not valid:
            raise MalformedRequest(self.packet_type, 'field %r is %s, expected %s' % (name, type(value).__name__, expected.__name__))

        return value


    def pack(self, request):
        """ Return a dictionary of the JSON-serializable fields for *request*.
        """

        raise NotImplementedError('pack() must be implemented by a subclass')


    def unpack(self, payload):
        """ Return a new request built from the decoded *payload* dictionary.
        """

        raise NotImplementedError('unpack() must be implemented by a subclass')


# end of class Codec



class HttpRequestCodec(Codec):
    """ Codec for :class:`message.HttpRequest` instances. Each header
        occurrence is serialized as a separate 'key:value' string, preserving
        duplicates and order. The body is carried as UTF-8 text; a body that
        is not valid UTF-8 cannot be encoded, nor can a header name containing
        a colon.

        The service name is not serialized. It is derived from the headers
        of the decoded request.
    """

    def pack(self, request):

        headers = list()
        for key,value in request.headers:
            if fields.SEPARATOR in key:
                raise ValueError("header name cannot contain ':': " + repr(key))
            headers.append(key + fields.SEPARATOR + value)

        payload = dict()
        payload[fields.PROTOCOL_VERSION] = request.protocol_version
        payload[fields.METHOD] = request.method
        payload[fields.URI] = request.uri
        payload[fields.HEADERS] = headers
        payload[fields.CONTENT] = request.content.decode('utf-8')

        return payload


    def unpack(self, payload):

        protocol_version = self.field(payload, fields.PROTOCOL_VERSION, str)
        method = self.field(payload, fields.METHOD, str)
        uri = self.field(payload, fields.URI, str)
        content = self.field(payload, fields.CONTENT, str)
        entries = self.field(payload, fields.HEADERS, list)

        # Header values may themselves contain colons; only the first colon
        # separates the key from the value.

        headers = list()
        for entry in entries:
            if not isinstance(entry, str):
                raise MalformedRequest(self.packet_type, 'header entry is not a string: ' + repr(entry))

            key,separator,value = entry.partition(fields.SEPARATOR)
            if separator == '':
                raise MalformedRequest(self.packet_type, 'header entry has no separator: ' + repr(entry))

            headers.append((key, value))

        body = content.encode('utf-8')

        request = message.HttpRequest(method, uri, headers, body, protocol_version, self.packet_type)
        return request


# end of class HttpRequestCodec



class StatediffApplyCodec(Codec):
    """ Codec for :class:`message.StatediffApplyRequest` instances. The
        request id is always serialized and always restored as-is; a payload
        without one is malformed, since substituting a new id would break
        agreement between replicas.
    """

    def pack(self, request):

        payload = dict()
        payload[fields.SERVICE_NAME] = request.service_name
        payload[fields.STATEDIFF] = request.statediff.decode('utf-8')
        payload[fields.REQUEST_ID] = request.request_id

        return payload


    def unpack(self, payload):

        service_name = self.field(payload, fields.SERVICE_NAME, str)
        statediff = self.field(payload, fields.STATEDIFF, str)
        request_id = self.field(payload, fields.REQUEST_ID, int)

        statediff = statediff.encode('utf-8')

        request = message.StatediffApplyRequest(service_name, statediff, request_id)
        return request


# end of class StatediffApplyCodec



def prefix(packet_type):
    """ Return the serialized prefix for *packet_type*, such as 'xdn:31300:'.
    """

    return '%s%d%s' % (fields.PREFIX, packet_type.code, fields.SEPARATOR)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
