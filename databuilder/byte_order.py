# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

r"""
Byte order (endianness) of the fixed-width integers appended to a builder.

Integers are first converted using the host's native byte order and then flipped when the requested order differs:

>>> correct_byte_order(b'\x01\x02', ByteOrder.BIG_ENDIAN, native=ByteOrder.LITTLE_ENDIAN)
b'\x02\x01'
>>> correct_byte_order(b'\x01\x02', ByteOrder.BIG_ENDIAN, native=ByteOrder.BIG_ENDIAN)
b'\x01\x02'
"""

import sys
from enum import Enum, unique
from typing import Optional, Union

from databuilder.exceptions import InvalidArgumentError


@unique
class ByteOrder(Enum):
    """The byte orders supported by DataBuilder, values are the same strings used by `int.to_bytes`."""

    # the least significant bytes are ordered first
    LITTLE_ENDIAN = 'little'

    # the most significant bytes are ordered first
    BIG_ENDIAN = 'big'

    @classmethod
    def native(cls) -> 'ByteOrder':
        """The byte order of the host platform."""
        return cls(sys.byteorder)

    @classmethod
    def parse(cls, value: Union['ByteOrder', str]) -> 'ByteOrder':
        """Get a ByteOrder from either an instance or its value.

        >>> ByteOrder.parse('big')
        <ByteOrder.BIG_ENDIAN: 'big'>
        >>> ByteOrder.parse(ByteOrder.LITTLE_ENDIAN)
        <ByteOrder.LITTLE_ENDIAN: 'little'>
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError as e:
            raise InvalidArgumentError(f'invalid byte order: {value!r}') from e


def correct_byte_order(data: bytes, order: ByteOrder, *, native: Optional[ByteOrder] = None) -> bytes:
    """Return `data` reversed if `order` differs from the `native` order (the host's when omitted).

    The input is never modified, the result is always a new immutable sequence when reversed.
    """
    if native is None:
        native = ByteOrder.native()
    if order is native:
        return bytes(data)
    return bytes(reversed(data))
