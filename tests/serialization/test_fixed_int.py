import struct

import pytest

from databuilder.byte_order import ByteOrder
from databuilder.exceptions import InvalidArgumentError
from databuilder.serialization import Serializer
from databuilder.serialization.encoding.int import encode_int

# (struct format character, byte length, signed)
INT_FORMATS = [
    ('b', 1, True),
    ('B', 1, False),
    ('h', 2, True),
    ('H', 2, False),
    ('i', 4, True),
    ('I', 4, False),
    ('q', 8, True),
    ('Q', 8, False),
]

STRUCT_PREFIXES = {
    ByteOrder.LITTLE_ENDIAN: '<',
    ByteOrder.BIG_ENDIAN: '>',
}


def _encode(number: int, *, length: int, signed: bool, byte_order: ByteOrder) -> bytes:
    se = Serializer.build_bytes_serializer()
    encode_int(se, number, length=length, signed=signed, byte_order=byte_order)
    return bytes(se.finalize())


def _bounds(length: int, signed: bool) -> tuple[int, int]:
    bits = 8 * length
    if signed:
        return -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    return 0, (1 << bits) - 1


@pytest.mark.parametrize('byte_order', list(ByteOrder))
@pytest.mark.parametrize('fmt, length, signed', INT_FORMATS)
def test_matches_struct_pack(fmt: str, length: int, signed: bool, byte_order: ByteOrder) -> None:
    lower, upper = _bounds(length, signed)
    struct_fmt = STRUCT_PREFIXES[byte_order] + fmt
    for number in (lower, lower + 1, 0, 1, upper - 1, upper):
        assert _encode(number, length=length, signed=signed, byte_order=byte_order) == struct.pack(struct_fmt, number)


@pytest.mark.parametrize('byte_order', list(ByteOrder))
@pytest.mark.parametrize('fmt, length, signed', INT_FORMATS)
def test_out_of_bounds(fmt: str, length: int, signed: bool, byte_order: ByteOrder) -> None:
    lower, upper = _bounds(length, signed)
    for number in (lower - 1, upper + 1):
        with pytest.raises(InvalidArgumentError, match='does not fit') as e:
            _encode(number, length=length, signed=signed, byte_order=byte_order)
        assert isinstance(e.value.__cause__, OverflowError)


@pytest.mark.parametrize('value', [1.0, '1', None, b'\x01', True, False])
def test_not_an_int(value: object) -> None:
    with pytest.raises(InvalidArgumentError, match='expected an int'):
        _encode(value, length=4, signed=True, byte_order=ByteOrder.LITTLE_ENDIAN)  # type: ignore[arg-type]


def test_nothing_written_on_failure() -> None:
    se = Serializer.build_bytes_serializer()
    with pytest.raises(InvalidArgumentError):
        encode_int(se, -1, length=2, signed=False, byte_order=ByteOrder.BIG_ENDIAN)
    assert se.cur_pos() == 0


def test_known_values() -> None:
    assert _encode(-3, length=4, signed=True, byte_order=ByteOrder.LITTLE_ENDIAN) == b'\xfd\xff\xff\xff'
    assert _encode(-3, length=4, signed=True, byte_order=ByteOrder.BIG_ENDIAN) == b'\xff\xff\xff\xfd'
    assert _encode(0x0102, length=2, signed=False, byte_order=ByteOrder.LITTLE_ENDIAN) == b'\x02\x01'
    assert _encode(0x0102, length=2, signed=False, byte_order=ByteOrder.BIG_ENDIAN) == b'\x01\x02'
