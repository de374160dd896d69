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
Limit how many bytes can be written to a serializer.

>>> se = Serializer.build_bytes_serializer()
>>> limited = se.with_max_bytes(3)
>>> limited.write_bytes(b'ab')
>>> limited.write_byte(0x63)
>>> limited.write_byte(0x64)
Traceback (most recent call last):
    ...
databuilder.exceptions.MaxBytesExceededError: cannot write 1 more byte(s), the limit is 3
>>> bytes(se.finalize())
b'abc'
"""

from typing import TypeVar

from typing_extensions import Buffer, override

from databuilder.exceptions import MaxBytesExceededError
from databuilder.serialization.serializer import Serializer

from .generic_adapter import GenericSerializerAdapter

S = TypeVar('S', bound=Serializer)


class MaxBytesSerializer(GenericSerializerAdapter[S]):
    def __init__(self, serializer: S, max_bytes: int) -> None:
        super().__init__(serializer)
        self._max_bytes = max_bytes
        self._bytes_left = max_bytes

    def _check_update_exceeds(self, write_size: int) -> None:
        if write_size > self._bytes_left:
            raise MaxBytesExceededError(f'cannot write {write_size} more byte(s), the limit is {self._max_bytes}')
        self._bytes_left -= write_size

    @override
    def write_byte(self, data: int) -> None:
        self._check_update_exceeds(1)
        super().write_byte(data)

    @override
    def write_bytes(self, data: Buffer) -> None:
        data_view = memoryview(data)
        self._check_update_exceeds(data_view.nbytes)
        super().write_bytes(data_view)
