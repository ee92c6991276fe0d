"""Protocol constants.

Keep these in one place to avoid stringly-typed request handling. The field
names are part of the wire format and must not be renamed.
"""

# Every serialized request starts with this prefix, followed by the decimal
# packet code and another colon. The prefix keeps the replication layer from
# mistaking a serialized request for one of its own JSON packets.
PREFIX = "xdn:"
SEPARATOR = ":"

# HTTP-request payload
PROTOCOL_VERSION = "protocolVersion"
METHOD = "method"
URI = "uri"
HEADERS = "headers"
CONTENT = "content"

# Statediff-apply payload
SERVICE_NAME = "sn"
STATEDIFF = "sd"
REQUEST_ID = "id"

# Request headers consulted for the service name
XDN = "XDN"
HOST = "Host"

# Result status for envelope.inspect()
NOT_OURS = "NOT_OURS"
MALFORMED = "MALFORMED"
OK = "OK"
