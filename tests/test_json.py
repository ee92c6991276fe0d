import json
import pytest
import xdn


def test_json_encode_and_decode():
    encode_and_decode(json.dumps, json.loads, dump_is_bytes=False)


def test_xdn_encode_and_decode():
    encode_and_decode(xdn.json.dumps, xdn.json.loads)


def encode_and_decode(dumps, loads, dump_is_bytes=True):

    input_dictionary = dict()
    input_dictionary['list'] = ['key:value', 'a:b:c', '=,;:"\'`']
    input_dictionary['text'] = 'somestringcontent é中'
    input_dictionary['id'] = 1729000000000
    input_dictionary['none'] = None
    input_dictionary['true'] = True

    encoded = dumps(input_dictionary)

    if dump_is_bytes:
        assert isinstance(encoded, bytes)
    else:
        assert isinstance(encoded, str)

    # Don't compare the encoded JSON against a pre-set notion of what it
    # should look like; whitespace handling varies between the libraries.

    decoded = loads(encoded)
    assert decoded == input_dictionary


def test_decode_from_string():
    """ Serialized requests are strings, not bytes; the wrapper has to
        accept either.
    """

    decoded = xdn.json.loads('{"id": 42}')
    assert decoded == {'id': 42}


def test_decode_error():

    for invalid in ('{not valid}', '{"id": 42', '', 'xdn'):
        with pytest.raises(xdn.json.DecodeError):
            xdn.json.loads(invalid)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
