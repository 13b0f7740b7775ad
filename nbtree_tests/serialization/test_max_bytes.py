import pytest

from nbtree.serialization import Deserializer, InvalidValueError, MaxBytesExceededError, OutOfDataError, Serializer
from nbtree.serialization.adapters import MaxBytesDeserializer, MaxBytesSerializer
from nbtree.serialization.encoding.int import decode_int, encode_int


def test_serializer_within_bound() -> None:
    se = Serializer.build_bytes_serializer().with_max_bytes(5)
    assert isinstance(se, MaxBytesSerializer)
    encode_int(se, 1)
    se.write_byte(2)
    assert se.bytes_left == 0
    assert se.finalize() == b'\x00\x00\x00\x01\x02'


def test_serializer_exceeds_bound() -> None:
    se = Serializer.build_bytes_serializer().with_max_bytes(3)
    with pytest.raises(MaxBytesExceededError):
        encode_int(se, 1)
    assert se.bytes_left == 3


def test_failed_write_keeps_budget() -> None:
    se = Serializer.build_bytes_serializer().with_max_bytes(3)
    with pytest.raises(InvalidValueError):
        se.write_byte(256)
    assert se.bytes_left == 3
    se.write_bytes(b'abc')
    assert se.bytes_left == 0


def test_deserializer_within_bound() -> None:
    de = Deserializer.build_bytes_deserializer(b'\x00\x00\x00\x07\x08').with_max_bytes(5)
    assert isinstance(de, MaxBytesDeserializer)
    assert decode_int(de) == 7
    assert de.read_byte() == 8
    assert de.bytes_left == 0
    assert de.is_empty()


def test_deserializer_exceeds_bound() -> None:
    de = Deserializer.build_bytes_deserializer(b'\x00\x00\x00\x07').with_max_bytes(3)
    with pytest.raises(MaxBytesExceededError):
        decode_int(de)
    assert de.bytes_left == 3


def test_failed_read_keeps_budget() -> None:
    de = Deserializer.build_bytes_deserializer(b'\x01').with_max_bytes(4)
    with pytest.raises(OutOfDataError):
        de.read_bytes(2)
    assert de.bytes_left == 4
    assert de.read_byte() == 1
    assert de.bytes_left == 3


def test_optional_max_bytes() -> None:
    de = Deserializer.build_bytes_deserializer(b'')
    assert de.with_optional_max_bytes(None) is de
    assert isinstance(de.with_optional_max_bytes(0), MaxBytesDeserializer)
    se = Serializer.build_bytes_serializer()
    assert se.with_optional_max_bytes(None) is se
