import pytest

from kernelkit.strings import hex_string


def test_bytes_are_zero_padded():
    assert hex_string(b"\x00\x01\xff") == "0001ff"


def test_iterable_of_ints():
    assert hex_string([0, 15, 16]) == "000f10"


def test_empty_input_gives_empty_string():
    assert hex_string(b"") == ""


@pytest.mark.parametrize("data", [b"abc", bytes(range(256)), bytearray(b"\x10\x20")])
def test_round_trip(data):
    result = hex_string(data)
    assert bytes.fromhex(result) == bytes(data)
    assert len(result) == 2 * len(data)
    assert result == result.lower()


def test_out_of_range_value_raises():
    with pytest.raises(ValueError):
        hex_string([256])