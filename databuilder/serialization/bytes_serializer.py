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

from typing_extensions import Buffer, override

from .serializer import Serializer


class BytesSerializer(Serializer):
    """Simple implementation of Serializer to write to memory.

    Nothing is concatenated until finalize is called, before that every write is kept as a separate part. Bytes-like
    objects that could be mutated by the caller (bytearray, memoryview of one) are copied when written.

    >>> se = Serializer.build_bytes_serializer()
    >>> se.write_byte(0x46)
    >>> se.write_bytes(b'oo')
    >>> se.cur_pos()
    3
    >>> bytes(se.finalize())
    b'Foo'
    """

    def __init__(self) -> None:
        self._parts: list[bytes] = []
        self._pos: int = 0

    @override
    def finalize(self) -> memoryview:
        result = memoryview(b''.join(self._parts))
        del self._parts
        del self._pos
        return result

    @override
    def cur_pos(self) -> int:
        return self._pos

    @override
    def write_byte(self, data: int) -> None:
        # int.to_bytes checks for correct range
        self._parts.append(int.to_bytes(data, length=1, byteorder='big'))
        self._pos += 1

    @override
    def write_bytes(self, data: Buffer) -> None:
        part = bytes(memoryview(data))
        self._parts.append(part)
        self._pos += len(part)
