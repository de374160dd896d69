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
This module implements encoding of text, without a length prefix and without a terminator.

Characters the encoding can't represent are handled by the `errors` handler, by default they are replaced:

>>> se = Serializer.build_bytes_serializer()
>>> encode_text(se, 'Foo€', encoding='ascii')  # writes 466f6f3f
>>> encode_text(se, 'Foo€', encoding='utf-8')  # writes 466f6fe282ac
>>> bytes(se.finalize()).hex()
'466f6f3f466f6fe282ac'

>>> se = Serializer.build_bytes_serializer()
>>> encode_text(se, 'Foo€', encoding='ascii', errors='strict')
Traceback (most recent call last):
    ...
databuilder.exceptions.InvalidArgumentError: cannot encode 'Foo€' using ascii
"""

from databuilder.exceptions import InvalidArgumentError
from databuilder.serialization import Serializer
from databuilder.text_encoding import DEFAULT_ENCODING_ERRORS


def encode_text(serializer: Serializer, value: str, *, encoding: str, errors: str = DEFAULT_ENCODING_ERRORS) -> None:
    """ Encode a string using the given text encoding.

    The encoding is expected to be already resolved, see `databuilder.text_encoding.resolve_encoding`.
    """
    if not isinstance(value, str):
        raise InvalidArgumentError(f'expected a str, got {type(value).__name__}')
    try:
        data = value.encode(encoding, errors)
    except UnicodeEncodeError as e:
        raise InvalidArgumentError(f'cannot encode {value!r} using {encoding}') from e
    serializer.write_bytes(data)
