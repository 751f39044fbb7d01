import pytest

from chwire.protocol import ClientCode, CompressionState, ServerCode, Stage


@pytest.mark.parametrize("enum_cls", [ServerCode, ClientCode, CompressionState, Stage])
def test_round_trip_through_value(enum_cls):
    for member in enum_cls:
        assert enum_cls(int(member)) is member


def test_server_codes_are_contiguous():
    looked_up = [ServerCode(value) for value in range(15)]
    assert set(looked_up) == set(ServerCode)
    assert [int(code) for code in looked_up] == list(range(15))


def test_client_codes_are_contiguous():
    looked_up = [ClientCode(value) for value in range(5)]
    assert set(looked_up) == set(ClientCode)
    assert [int(code) for code in looked_up] == list(range(5))


def test_lookup_server_packet_types():
    assert ServerCode(2) is ServerCode.EXCEPTION
    assert ServerCode(5) is ServerCode.END_OF_STREAM
    assert ServerCode(14) is ServerCode.PROFILE_EVENTS


def test_lookup_client_packet_types():
    assert ClientCode(1) is ClientCode.QUERY
    assert ClientCode(4) is ClientCode.PING


def test_compression_state_as_flag():
    assert CompressionState(1) is CompressionState.ENABLE
    assert CompressionState(0) is CompressionState.DISABLE
    assert bool(CompressionState(1)) is True
    assert bool(CompressionState(0)) is False


def test_stage_complete_value():
    assert Stage(2) is Stage.COMPLETE


def test_unknown_server_code_rejected():
    with pytest.raises(ValueError):
        ServerCode(99)


def test_unknown_client_code_rejected():
    with pytest.raises(ValueError):
        ClientCode(5)