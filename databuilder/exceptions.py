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



class DataBuilderError(Exception):
    """Base class for exceptions in DataBuilder."""
    pass


class InvalidArgumentError(DataBuilderError, ValueError):
    """Raised when a builder operation is called with an invalid argument.

    Validation is always eager: the error is raised by the offending append/configure call, never deferred to build.
    """
    pass


class CyclicPatternError(InvalidArgumentError):
    """Raised when a repeat would make a builder (directly or indirectly) repeat itself."""
    pass


class SerializationError(DataBuilderError):
    """Base class for errors raised while writing the built data."""
    pass


class MaxBytesExceededError(SerializationError):
    """ This error is raised when the adapted serializer reached its maximum bytes write.

    After this exception is raised the adapted serializer cannot be used anymore, what was written so far is
    incomplete and should be discarded.
    """
    pass
