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

from typing import Any, Optional, Union

from structlog import get_logger
from typing_extensions import Self

from databuilder.byte_order import ByteOrder
from databuilder.conf.get_settings import get_global_settings
from databuilder.conf.settings import DataBuilderSettings
from databuilder.exceptions import CyclicPatternError, InvalidArgumentError
from databuilder.recipe import LiteralData, RecipeElement, RepeatPattern
from databuilder.serialization import Serializer
from databuilder.serialization.encoding.int import encode_int
from databuilder.serialization.encoding.text import encode_text
from databuilder.text_encoding import resolve_encoding

logger = get_logger()


class DataBuilder:
    """A utility for writing small binary data samples.

    Clients create a builder, chain calls to configure it and append data, then call `build`. The order in which the
    methods are called is the order in which their arguments end up in the built data:

        data = DataBuilder().set_byte_order(ByteOrder.BIG_ENDIAN).append_uint16(2).append_text('Foo').build()
        assert data == b'\\x00\\x02Foo'

    Every append converts its argument right away using the current encoding and byte order, so changing either only
    affects what is appended afterwards. The exception is `repeat`, which keeps a reference to another builder and
    evaluates it on every build.

    Equality and hashing are structural: two builders are equal when their recipes are, no matter how they are
    configured. Builders are mutable, so one used as a dict key or in a set must not be changed afterwards.

    A builder is not safe to mutate from multiple threads, building one that nobody is changing is.
    """

    def __init__(self, *, settings: Optional[DataBuilderSettings] = None) -> None:
        self._settings = settings if settings is not None else get_global_settings()
        self.log = logger.new()
        self._recipe_elements: list[RecipeElement] = []
        self._encoding: str = self._settings.DEFAULT_ENCODING
        self._encoding_errors: str = self._settings.ENCODING_ERRORS
        self._byte_order: ByteOrder = self._settings.DEFAULT_BYTE_ORDER

    @property
    def encoding(self) -> str:
        """Text encoding used by the next `append_text` calls."""
        return self._encoding

    @property
    def byte_order(self) -> ByteOrder:
        """Byte order used by the next integer appends."""
        return self._byte_order

    @property
    def recipe_elements(self) -> tuple[RecipeElement, ...]:
        return tuple(self._recipe_elements)

    def set_encoding(self, encoding: str) -> Self:
        """Set the encoding to use when appending text, text that was already appended is unaffected."""
        self._encoding = resolve_encoding(encoding)
        return self

    def set_byte_order(self, byte_order: Union[ByteOrder, str]) -> Self:
        """Set the byte order to use when appending integers, integers that were already appended are unaffected."""
        self._byte_order = ByteOrder.parse(byte_order)
        return self

    def append_bytes(self, value: Any) -> Self:
        """Append a copy of an arbitrary bytes-like object."""
        if value is None:
            raise InvalidArgumentError('value must not be None')
        if isinstance(value, str):
            raise InvalidArgumentError('expected a bytes-like object, got str (use append_text)')
        try:
            data = bytes(memoryview(value))
        except TypeError as e:
            raise InvalidArgumentError(f'expected a bytes-like object, got {type(value).__name__}') from e
        return self._append(LiteralData(data))

    def append_text(self, value: str) -> Self:
        """Append a string using the current encoding, the string is not null terminated."""
        if value is None:
            raise InvalidArgumentError('value must not be None')
        se = Serializer.build_bytes_serializer()
        encode_text(se, value, encoding=self._encoding, errors=self._encoding_errors)
        return self._append(LiteralData(bytes(se.finalize())))

    def append_int8(self, value: int) -> Self:
        return self._append_int(value, length=1, signed=True)

    def append_uint8(self, value: int) -> Self:
        return self._append_int(value, length=1, signed=False)

    def append_int16(self, value: int) -> Self:
        return self._append_int(value, length=2, signed=True)

    def append_uint16(self, value: int) -> Self:
        return self._append_int(value, length=2, signed=False)

    def append_int32(self, value: int) -> Self:
        return self._append_int(value, length=4, signed=True)

    def append_uint32(self, value: int) -> Self:
        return self._append_int(value, length=4, signed=False)

    def append_int64(self, value: int) -> Self:
        return self._append_int(value, length=8, signed=True)

    def append_uint64(self, value: int) -> Self:
        return self._append_int(value, length=8, signed=False)

    def repeat(self, count: int, pattern: 'DataBuilder') -> Self:
        """Append the output of another builder, repeated `count` times.

        The pattern is not copied: it is built again every time this builder is built, so later changes to it are
        reflected. A builder cannot repeat itself, neither directly nor through other patterns.
        """
        if pattern is None:
            raise InvalidArgumentError('pattern must not be None')
        if not isinstance(pattern, DataBuilder):
            raise InvalidArgumentError(f'pattern must be a DataBuilder, got {type(pattern).__name__}')
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            raise InvalidArgumentError(f'count must be a non-negative int, got {count!r}')
        if pattern is self:
            raise InvalidArgumentError('a builder cannot repeat itself')
        if pattern._depends_on(self):
            self.log.debug('reject cyclic repeat', count=count)
            raise CyclicPatternError('pattern already repeats this builder')
        return self._append(RepeatPattern(count, pattern))

    def serialize(self, serializer: Serializer) -> None:
        """Write the recipe to the given serializer."""
        for element in self._recipe_elements:
            element.serialize(serializer)

    def build(self) -> bytes:
        """Build the data according to the recipe accumulated so far.

        Building has no side effects, calling it again without changing the recipe gives the same result.
        """
        se = Serializer.build_bytes_serializer()
        self.serialize(se.with_optional_max_bytes(self._settings.MAX_OUTPUT_BYTES))
        result = bytes(se.finalize())
        self.log.debug('build', elements=len(self._recipe_elements), length=len(result))
        return result

    def __bytes__(self) -> bytes:
        return self.build()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DataBuilder):
            return NotImplemented
        return self._recipe_elements == other._recipe_elements

    def __hash__(self) -> int:
        return hash(tuple(self._recipe_elements))

    def __repr__(self) -> str:
        return f'DataBuilder(recipe_elements={self._recipe_elements!r})'

    def _append(self, element: RecipeElement) -> Self:
        self._recipe_elements.append(element)
        return self

    def _append_int(self, value: int, *, length: int, signed: bool) -> Self:
        se = Serializer.build_bytes_serializer()
        encode_int(se, value, length=length, signed=signed, byte_order=self._byte_order)
        return self._append(LiteralData(bytes(se.finalize())))

    def _depends_on(self, other: 'DataBuilder') -> bool:
        """Whether `other` is this builder or is repeated somewhere in its recipe, at any depth."""
        pending = [self]
        visited: set[int] = set()
        while pending:
            builder = pending.pop()
            if builder is other:
                return True
            if id(builder) in visited:
                continue
            visited.add(id(builder))
            pending.extend(e.pattern for e in builder._recipe_elements if isinstance(e, RepeatPattern))
        return False
