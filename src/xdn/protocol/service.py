""" Determine which XDN service a request is meant for. The service name is
    embedded in the request headers; for example, the service name is
    'hello' for either of these requests:

    * a request with ``XDN: hello`` in the header.
    * a request with ``Host: hello.abc.xdn.io:80`` in the header.
"""

from . import fields


def header(headers, name):
    """ Return the first value in the *headers* sequence of (key, value)
        pairs whose key matches *name*, ignoring case. Returns None if the
        header is not present.
    """

    name = name.lower()

    for key,value in headers:
        if key.lower() == name:
            return value

    return None



def resolve(headers):
    """ Return the service name for the supplied *headers*, or None if no
        service name can be derived. An explicit ``XDN`` header takes
        precedence; otherwise the first dot-separated segment of the
        ``Host`` header is used.
    """

    # case-1: embedded in the XDN header (e.g., XDN: alice-book-catalog)

    xdn_header = header(headers, fields.XDN)
    if xdn_header:
        return xdn_header

    # case-2: embedded in the Host header (e.g., Host: alice-book-catalog.xdn.io)

    host = header(headers, fields.HOST)
    if not host:
        return None

    service_name = host.split('.')[0]
    if service_name:
        return service_name

    return None


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
