import pytest

from nbtree.serialization import Deserializer, InvalidValueError, OutOfDataError, Serializer
from nbtree.serialization.encoding.int import (
    decode_byte,
    decode_int,
    decode_long,
    decode_short,
    encode_byte,
    encode_int,
    encode_long,
    encode_short,
    signed_to_unsigned,
    unsigned_to_signed,
)

WIDTHS = [
    (encode_byte, decode_byte, 8),
    (encode_short, decode_short, 16),
    (encode_int, decode_int, 32),
    (encode_long, decode_long, 64),
]


def _encode(encoder, value) -> bytes:
    se = Serializer.build_bytes_serializer()
    encoder(se, value)
    return bytes(se.finalize())


def _decode(decoder, data: bytes):
    de = Deserializer.build_bytes_deserializer(data)
    value = decoder(de)
    assert de.is_empty()
    return value


@pytest.mark.parametrize('encoder,decoder,bits', WIDTHS)
def test_signed_boundaries(encoder, decoder, bits) -> None:
    lower_bound = -(1 << (bits - 1))
    upper_bound = (1 << (bits - 1)) - 1
    for value in (lower_bound, -1, 0, 1, upper_bound):
        data = _encode(encoder, value)
        assert len(data) == bits // 8
        assert _decode(decoder, data) == value


@pytest.mark.parametrize('encoder,decoder,bits', WIDTHS)
def test_wire_is_big_endian_twos_complement(encoder, decoder, bits) -> None:
    size = bits // 8
    assert _encode(encoder, -1) == b'\xff' * size
    assert _encode(encoder, 1) == b'\x00' * (size - 1) + b'\x01'
    assert _encode(encoder, -(1 << (bits - 1))) == b'\x80' + b'\x00' * (size - 1)
    assert _decode(decoder, b'\x7f' + b'\xff' * (size - 1)) == (1 << (bits - 1)) - 1


@pytest.mark.parametrize('encoder,decoder,bits', WIDTHS)
def test_unsigned_representation_is_accepted(encoder, decoder, bits) -> None:
    assert _encode(encoder, (1 << bits) - 1) == _encode(encoder, -1)


@pytest.mark.parametrize('encoder,decoder,bits', WIDTHS[1:])
def test_out_of_range(encoder, decoder, bits) -> None:
    for value in (1 << bits, -(1 << (bits - 1)) - 1):
        with pytest.raises(InvalidValueError):
            _encode(encoder, value)


@pytest.mark.parametrize('value', [1.0, '1', None, True])
def test_not_an_int(value) -> None:
    with pytest.raises(InvalidValueError):
        _encode(encode_int, value)


@pytest.mark.parametrize('encoder,decoder,bits', WIDTHS)
def test_short_read(encoder, decoder, bits) -> None:
    de = Deserializer.build_bytes_deserializer(b'\x00' * (bits // 8 - 1))
    with pytest.raises(OutOfDataError):
        decoder(de)


def test_long_halves() -> None:
    # high half first, then low half
    assert _encode(encode_long, 0x0123456789ABCDEF).hex() == '0123456789abcdef'
    assert _decode(decode_long, bytes.fromhex('ffffffff00000000')) == -(1 << 32)
    assert _decode(decode_long, bytes.fromhex('8000000000000001')) == -(1 << 63) + 1


def test_signed_unsigned_conversion() -> None:
    assert unsigned_to_signed(0x80, 8) == -128
    assert unsigned_to_signed(0x7F, 8) == 127
    assert signed_to_unsigned(-128, 8) == 0x80
    assert signed_to_unsigned(-(1 << 63), 64) == 1 << 63
    for value in (-(1 << 31), -1, 0, (1 << 31) - 1):
        assert unsigned_to_signed(signed_to_unsigned(value, 32), 32) == value


@pytest.mark.parametrize('value,expected', [
    (0x1FF, b'\xff'),
    (256, b'\x00'),
    (-129, b'\x7f'),
    (1 << 40 | 0x12, b'\x12'),
])
def test_byte_keeps_low_bits(value: int, expected: bytes) -> None:
    assert _encode(encode_byte, value) == expected
