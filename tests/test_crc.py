import binascii
import zlib

import pytest

from echoctl.crc import PRESETS, Crc, reflect

SAMPLES = [b"", b"a", b"123456789", b"The quick brown fox", bytes(range(256))]


def crc32():
    return Crc(32, 0x04C11DB7, 0xFFFFFFFF, 0xFFFFFFFF, True, True)


@pytest.mark.parametrize("data", SAMPLES)
def test_crc32_matches_zlib(data):
    assert crc32().calc(data) == zlib.crc32(data)


@pytest.mark.parametrize("data", SAMPLES)
def test_crc16_1021_matches_crc_hqx(data):
    width, poly = PRESETS["CRC16_1021"]
    assert Crc(width, poly).calc(data) == binascii.crc_hqx(data, 0)


@pytest.mark.parametrize("init", [0, 0x1D0F, 0xFFFF])
def test_crc16_init_matches_crc_hqx(init):
    data = b"123456789"
    assert Crc(16, 0x1021, init).calc(data) == binascii.crc_hqx(data, init)


def test_crc32_check_value():
    assert crc32().calc(b"123456789") == 0xCBF43926


def test_crc8_check_value():
    assert Crc(8, 0x07).calc(b"123456789") == 0xF4


def test_incremental_equals_one_shot():
    data = b"incremental data feed"
    crc = crc32()
    crc.put_bytes(data[:5])
    for byte in data[5:]:
        crc.put_byte(byte)
    assert crc.done() == crc32().calc(data)


def test_done_resets_register():
    crc = Crc(16, 0x8005)
    first = crc.calc(b"abc")
    second = crc.calc(b"abc")
    assert first == second


def test_result_fits_width():
    for name, (width, poly) in PRESETS.items():
        value = Crc(width, poly, ref_in=True, ref_out=True).calc(bytes(range(256)))
        assert 0 <= value < (1 << width), name


def test_reflect_single_bit():
    assert reflect(0x01, 8) == 0x80


@pytest.mark.parametrize("value", [0, 1, 0x1234, 0xFFFF, 0xA5C3])
def test_reflect_is_involution(value):
    assert reflect(reflect(value, 16), 16) == value


def test_invalid_width():
    with pytest.raises(ValueError):
        Crc(12, 0x80F)


def test_byte_out_of_range():
    with pytest.raises(ValueError):
        Crc(8, 0x07).put_byte(256)