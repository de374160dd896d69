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
Names and resolution of the text encodings accepted by `DataBuilder.set_encoding`.

Any text encoding known to Python's `codecs` registry can be used. The generic `utf-16` and `utf-32` codecs would
prefix the output with a byte order mark, so they resolve to their BOM-less little-endian variants instead:

>>> resolve_encoding('UTF8')
'utf-8'
>>> resolve_encoding('utf-16')
'utf-16-le'
>>> resolve_encoding('base64')
Traceback (most recent call last):
    ...
databuilder.exceptions.InvalidArgumentError: not a text encoding: 'base64'
"""

import codecs
from typing import Any

from databuilder.exceptions import InvalidArgumentError

ASCII = 'ascii'
UTF7 = 'utf-7'
UTF8 = 'utf-8'
UTF16_LE = 'utf-16-le'
UTF16_BE = 'utf-16-be'
UTF32_LE = 'utf-32-le'
UTF32_BE = 'utf-32-be'

DEFAULT_ENCODING = ASCII

# how characters that the encoding cannot represent are handled, 'replace' writes '?' for ASCII
DEFAULT_ENCODING_ERRORS = 'replace'

_BOM_FREE_VARIANTS = {
    'utf-16': UTF16_LE,
    'utf-32': UTF32_LE,
}


def resolve_encoding(name: Any) -> str:
    """Return the canonical name of a text encoding, failing with InvalidArgumentError if it can't be used."""
    if name is None:
        raise InvalidArgumentError('encoding must not be None')
    if not isinstance(name, str):
        raise InvalidArgumentError(f'encoding must be a str, got {type(name).__name__}')
    try:
        codec_name = codecs.lookup(name).name
    except LookupError as e:
        raise InvalidArgumentError(f'unknown encoding: {name!r}') from e
    try:
        # non-text codecs (base64, hex, zlib, ...) are only rejected by str.encode
        ''.encode(codec_name)
    except LookupError as e:
        raise InvalidArgumentError(f'not a text encoding: {name!r}') from e
    return _BOM_FREE_VARIANTS.get(codec_name, codec_name)


def resolve_encoding_errors(errors: Any) -> str:
    """Check that `errors` names a registered codec error handler and return it."""
    if not isinstance(errors, str):
        raise InvalidArgumentError(f'encoding errors must be a str, got {type(errors).__name__}')
    try:
        codecs.lookup_error(errors)
    except LookupError as e:
        raise InvalidArgumentError(f'unknown encoding error handler: {errors!r}') from e
    return errors
