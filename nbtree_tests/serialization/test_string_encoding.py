import pytest

from nbtree.serialization import BadDataError, Deserializer, InvalidValueError, OutOfDataError, Serializer, TooLongError
from nbtree.serialization.encoding.string import MAX_STRING_LENGTH, decode_string, encode_string


def _encode(value: str, **kwargs) -> bytes:
    se = Serializer.build_bytes_serializer()
    encode_string(se, value, **kwargs)
    return bytes(se.finalize())


def test_latin1_is_one_byte_per_character() -> None:
    data = _encode('ÿé!')
    assert data == b'\x00\x03\xff\xe9!'
    assert decode_string(Deserializer.build_bytes_deserializer(data)) == 'ÿé!'


def test_utf8_can_be_selected() -> None:
    data = _encode('é', encoding='utf-8')
    assert data == b'\x00\x02\xc3\xa9'
    assert decode_string(Deserializer.build_bytes_deserializer(data), encoding='utf-8') == 'é'


def test_empty_string() -> None:
    data = _encode('')
    assert data == b'\x00\x00'
    assert decode_string(Deserializer.build_bytes_deserializer(data)) == ''


def test_length_is_unsigned() -> None:
    value = 'a' * 40000
    data = _encode(value)
    assert data[:2] == (40000).to_bytes(2, 'big')
    assert decode_string(Deserializer.build_bytes_deserializer(data)) == value


def test_max_length() -> None:
    assert len(_encode('a' * MAX_STRING_LENGTH)) == MAX_STRING_LENGTH + 2
    with pytest.raises(TooLongError):
        _encode('a' * (MAX_STRING_LENGTH + 1))


def test_not_representable() -> None:
    with pytest.raises(InvalidValueError):
        _encode('€')
    with pytest.raises(InvalidValueError):
        _encode(b'bytes')  # type: ignore[arg-type]


def test_invalid_utf8() -> None:
    de = Deserializer.build_bytes_deserializer(b'\x00\x01\xff')
    with pytest.raises(BadDataError):
        decode_string(de, encoding='utf-8')


def test_truncated() -> None:
    de = Deserializer.build_bytes_deserializer(b'\x00\x05abc')
    with pytest.raises(OutOfDataError):
        decode_string(de)
