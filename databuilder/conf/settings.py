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

from pathlib import Path
from typing import Optional, Union

from pydantic import field_validator

from databuilder.byte_order import ByteOrder
from databuilder.exceptions import InvalidArgumentError
from databuilder.text_encoding import (
    DEFAULT_ENCODING,
    DEFAULT_ENCODING_ERRORS,
    resolve_encoding,
    resolve_encoding_errors,
)
from databuilder.utils import pydantic


class DataBuilderSettings(pydantic.BaseModel):
    # Text encoding a new builder starts with, any name known to the `codecs` module
    DEFAULT_ENCODING: str = DEFAULT_ENCODING

    # Byte order a new builder starts with: "little" or "big"
    DEFAULT_BYTE_ORDER: ByteOrder = ByteOrder.LITTLE_ENDIAN

    # Codec error handler for characters the encoding can't represent ("replace", "strict", "ignore", ...)
    ENCODING_ERRORS: str = DEFAULT_ENCODING_ERRORS

    # Maximum length of the output of a single build, `None` means unlimited
    MAX_OUTPUT_BYTES: Optional[int] = None

    @field_validator('DEFAULT_ENCODING')
    @classmethod
    def _parse_encoding(cls, encoding: str) -> str:
        try:
            return resolve_encoding(encoding)
        except InvalidArgumentError as e:
            raise ValueError(str(e)) from e

    @field_validator('ENCODING_ERRORS')
    @classmethod
    def _parse_encoding_errors(cls, errors: str) -> str:
        try:
            return resolve_encoding_errors(errors)
        except InvalidArgumentError as e:
            raise ValueError(str(e)) from e

    @field_validator('MAX_OUTPUT_BYTES')
    @classmethod
    def _validate_max_output_bytes(cls, max_output_bytes: Optional[int]) -> Optional[int]:
        if max_output_bytes is not None and max_output_bytes <= 0:
            raise ValueError(f'MAX_OUTPUT_BYTES must be positive, got {max_output_bytes}')
        return max_output_bytes

    @classmethod
    def from_yaml(cls, *, filepath: Union[Path, str]) -> 'DataBuilderSettings':
        """Takes a filepath to a yaml file and returns a validated DataBuilderSettings instance."""
        from databuilder.utils.yaml import model_from_yaml
        return model_from_yaml(cls, filepath=filepath)
