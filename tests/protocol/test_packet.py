import pytest
import xdn

packet = xdn.protocol.packet


def test_defined():

    codes = set()

    for packet_type in packet.defined:
        assert packet.lookup(packet_type.code) is packet_type
        assert packet.lookup(str(packet_type.code)) is packet_type
        assert packet_type.code in packet.registry
        codes.add(packet_type.code)

    assert len(codes) == len(packet.defined)
    assert len(packet.registry) == len(packet.defined)

    assert packet.lookup(31300).kind == 'XDN_SERVICE_HTTP_REQUEST'
    assert packet.lookup(31301).kind == 'XDN_FORWARD_HTTP_REQUEST'
    assert packet.lookup(31302).kind == 'XDN_STATEDIFF_APPLY_REQUEST'


def test_unknown():

    with pytest.raises(KeyError):
        packet.lookup(31399)

    assert packet.get(31399) is None
    assert packet.get('not a number') is None
    assert packet.get(None) is None
    assert packet.get(True) is None
    assert packet.get(31300.7) is None
    assert packet.get(31300.0) is None
    assert packet.get(' 31300 ') is None
    assert packet.get('3_1300') is None
    assert packet.get('+31300') is None
    assert packet.get('٣١٣٠٠') is None
    assert 31399 not in packet.registry


def test_conflict():

    conflicting = list(packet.defined)
    conflicting.append(packet.PacketType(31300, 'SOMETHING_ELSE'))

    with pytest.raises(packet.RegistryConflict) as raised:
        packet.initialize(conflicting)

    assert raised.value.code == 31300
    assert raised.value.existing == 'XDN_SERVICE_HTTP_REQUEST'
    assert raised.value.conflicting == 'SOMETHING_ELSE'

    # A conflict is never a recoverable error.

    assert isinstance(raised.value, RuntimeError)
    assert not isinstance(raised.value, ValueError)


def test_duplicate_pairing():

    repeated = list(packet.defined) + list(packet.defined)
    registry = packet.initialize(repeated)

    assert len(registry) == len(packet.defined)


def test_frozen():

    registry = packet.initialize()

    with pytest.raises(RuntimeError):
        registry.register(31399, 'XDN_LATE_ARRIVAL')

    # The module-level registry is frozen too.

    with pytest.raises(RuntimeError):
        packet.registry.register(31399, 'XDN_LATE_ARRIVAL')


def test_register():

    registry = packet.Registry()
    added = registry.register(1, 'ONE')

    assert added == packet.PacketType(1, 'ONE')
    assert registry.lookup(1) == added

    with pytest.raises(TypeError):
        registry.register('2', 'TWO')

    with pytest.raises(TypeError):
        registry.register(True, 'TRUE')

    with pytest.raises(packet.RegistryConflict):
        registry.register(1, 'UNO')


def test_immutable():

    packet_type = packet.SERVICE_HTTP_REQUEST

    with pytest.raises(AttributeError):
        packet_type.code = 1


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
