''' JSON encoding and decoding for serialized requests, backed by msgspec.
    The :func:`dumps` method always returns bytes; :func:`loads` accepts
    either bytes or str.
'''

import msgspec


encoder = msgspec.json.Encoder()
decoder = msgspec.json.Decoder()

dumps = encoder.encode
loads = decoder.decode

# Everything loads() raises for input that is not valid JSON.

DecodeError = (msgspec.DecodeError,)

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
