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
A fluent builder for small binary data samples: raw bytes, text, fixed-width integers and repeated patterns.

    from databuilder import ByteOrder, DataBuilder

    header = DataBuilder().set_byte_order(ByteOrder.BIG_ENDIAN).append_uint16(0xCAFE).append_text('v1')
    data = DataBuilder().repeat(2, header).append_bytes(b'\\x00').build()
"""

from databuilder.builder import DataBuilder
from databuilder.byte_order import ByteOrder
from databuilder.conf.settings import DataBuilderSettings
from databuilder.exceptions import (
    CyclicPatternError,
    DataBuilderError,
    InvalidArgumentError,
    MaxBytesExceededError,
    SerializationError,
)
from databuilder.recipe import LiteralData, RecipeElement, RepeatPattern
from databuilder.version import __version__

__all__ = [
    'ByteOrder',
    'CyclicPatternError',
    'DataBuilder',
    'DataBuilderError',
    'DataBuilderSettings',
    'InvalidArgumentError',
    'LiteralData',
    'MaxBytesExceededError',
    'RecipeElement',
    'RepeatPattern',
    'SerializationError',
    '__version__',
]
