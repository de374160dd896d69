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
This module was made to hold the encoders used to turn builder arguments into bytes.

The general organization is that each submodule `x` deals with a single type and looks like this:

    def encode_x(serializer: Serializer, value: ValueType, ...config params...) -> None:
        ...

The "config params" are keyword-only and specific to each encoder (a byte order, a text encoding, ...). Encoders
validate their input and raise `InvalidArgumentError` before writing anything. There are no decoders, the built data
is never parsed back.
"""
