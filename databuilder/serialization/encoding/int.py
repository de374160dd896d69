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

"""
This module implements encoding of integers with a fixed size, the size, signedness and byte order are parametrized.

The number is first converted using the host's native byte order, then reordered if the requested order differs.

>>> se = Serializer.build_bytes_serializer()
>>> encode_int(se, -1, length=1, signed=True, byte_order=ByteOrder.LITTLE_ENDIAN)  # writes ff
>>> encode_int(se, -2, length=2, signed=True, byte_order=ByteOrder.LITTLE_ENDIAN)  # writes feff
>>> encode_int(se, 2, length=2, signed=False, byte_order=ByteOrder.BIG_ENDIAN)  # writes 0002
>>> encode_int(se, 3, length=4, signed=False, byte_order=ByteOrder.BIG_ENDIAN)  # writes 00000003
>>> bytes(se.finalize()).hex()
'fffeff000200000003'

>>> se = Serializer.build_bytes_serializer()
>>> encode_int(se, 256, length=1, signed=False, byte_order=ByteOrder.LITTLE_ENDIAN)
Traceback (most recent call last):
    ...
databuilder.exceptions.InvalidArgumentError: 256 does not fit in 1 unsigned byte(s)
"""

import sys

from databuilder.byte_order import ByteOrder, correct_byte_order
from databuilder.exceptions import InvalidArgumentError
from databuilder.serialization import Serializer


def encode_int(serializer: Serializer, number: int, *, length: int, signed: bool, byte_order: ByteOrder) -> None:
    """ Encode an int using the given byte-length, signedness and byte order.

    This modules's docstring has more details and examples.
    """
    if isinstance(number, bool) or not isinstance(number, int):
        raise InvalidArgumentError(f'expected an int, got {type(number).__name__}')
    try:
        native_data = int.to_bytes(number, length, byteorder=sys.byteorder, signed=signed)
    except OverflowError as e:
        kind = 'signed' if signed else 'unsigned'
        raise InvalidArgumentError(f'{number} does not fit in {length} {kind} byte(s)') from e
    serializer.write_bytes(correct_byte_order(native_data, byte_order))
