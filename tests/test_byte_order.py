import sys

import pytest

from databuilder.byte_order import ByteOrder, correct_byte_order
from databuilder.exceptions import InvalidArgumentError


def test_native_matches_host() -> None:
    assert ByteOrder.native().value == sys.byteorder


@pytest.mark.parametrize('native', [ByteOrder.LITTLE_ENDIAN, ByteOrder.BIG_ENDIAN])
def test_same_order_is_unchanged(native: ByteOrder) -> None:
    assert correct_byte_order(b'\x01\x02\x03\x04', native, native=native) == b'\x01\x02\x03\x04'


@pytest.mark.parametrize('order, native', [
    (ByteOrder.LITTLE_ENDIAN, ByteOrder.BIG_ENDIAN),
    (ByteOrder.BIG_ENDIAN, ByteOrder.LITTLE_ENDIAN),
])
def test_other_order_is_reversed(order: ByteOrder, native: ByteOrder) -> None:
    assert correct_byte_order(b'\x01\x02\x03\x04', order, native=native) == b'\x04\x03\x02\x01'


def test_single_byte_is_never_changed() -> None:
    assert correct_byte_order(b'\xfe', ByteOrder.BIG_ENDIAN, native=ByteOrder.LITTLE_ENDIAN) == b'\xfe'


def test_input_is_not_mutated() -> None:
    data = bytearray(b'\x01\x02')
    result = correct_byte_order(data, ByteOrder.BIG_ENDIAN, native=ByteOrder.LITTLE_ENDIAN)
    assert result == b'\x02\x01'
    assert isinstance(result, bytes)
    assert data == bytearray(b'\x01\x02')


def test_default_native_is_host_order() -> None:
    host = ByteOrder.native()
    assert correct_byte_order(b'\x01\x02', host) == b'\x01\x02'


def test_parse() -> None:
    assert ByteOrder.parse('little') is ByteOrder.LITTLE_ENDIAN
    assert ByteOrder.parse('big') is ByteOrder.BIG_ENDIAN
    assert ByteOrder.parse(ByteOrder.BIG_ENDIAN) is ByteOrder.BIG_ENDIAN

    with pytest.raises(InvalidArgumentError, match='invalid byte order'):
        ByteOrder.parse('middle')

    with pytest.raises(InvalidArgumentError):
        ByteOrder.parse(None)  # type: ignore[arg-type]
