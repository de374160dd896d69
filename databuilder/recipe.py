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
The elements a `DataBuilder` recipe is made of.

A recipe is an ordered list of elements, building it concatenates what each element writes. There are two kinds:

- `LiteralData`: a fixed byte sequence, captured when something is appended to the builder;
- `RepeatPattern`: another builder, evaluated `count` times every time the recipe is built.

Both are immutable and compare by value, which is what makes two builders with the same recipe equal:

>>> LiteralData(b'\x01\x02') == LiteralData(bytes([1, 2]))
True
>>> LiteralData(b'\xff\xff').build()
b'\xff\xff'
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from databuilder.exceptions import InvalidArgumentError
from databuilder.serialization import Serializer

if TYPE_CHECKING:
    from databuilder.builder import DataBuilder


class RecipeElement(ABC):
    @abstractmethod
    def serialize(self, serializer: Serializer) -> None:
        """Write this element's bytes."""
        raise NotImplementedError

    def build(self) -> bytes:
        """Materialize this element alone."""
        se = Serializer.build_bytes_serializer()
        self.serialize(se)
        return bytes(se.finalize())


@dataclass(frozen=True)
class LiteralData(RecipeElement):
    data: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.data, bytes):
            raise InvalidArgumentError(f'data must be bytes, got {type(self.data).__name__}')

    def serialize(self, serializer: Serializer) -> None:
        serializer.write_bytes(self.data)


@dataclass(frozen=True)
class RepeatPattern(RecipeElement):
    """Repeat the output of another builder.

    The pattern is held by reference, changes made to it after the repeat was added show up in later builds.
    """

    count: int
    pattern: DataBuilder

    def __post_init__(self) -> None:
        from databuilder.builder import DataBuilder
        if isinstance(self.count, bool) or not isinstance(self.count, int) or self.count < 0:
            raise InvalidArgumentError(f'count must be a non-negative int, got {self.count!r}')
        if not isinstance(self.pattern, DataBuilder):
            raise InvalidArgumentError(f'pattern must be a DataBuilder, got {type(self.pattern).__name__}')

    def serialize(self, serializer: Serializer) -> None:
        for _ in range(self.count):
            self.pattern.serialize(serializer)
