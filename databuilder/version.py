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

import os
import re
from typing import Optional

from structlog import get_logger

BASE_VERSION = '0.1.0'

DEFAULT_VERSION_SUFFIX = '-local'
BUILD_VERSION_ENV_VAR = 'DATABUILDER_BUILD_VERSION'

# Valid formats: 1.2.3 and 1.2.3-rc.1
BUILD_VERSION_REGEX = r'^\d+\.\d+\.\d+(-rc\.\d+)?$'

logger = get_logger()


def _get_build_version() -> Optional[str]:
    """Try to get the build version from the BUILD_VERSION_ENV_VAR env var and validate it.

    :return: The build version or None, if the env var is not set or the version is invalid.
    """
    build_version = os.environ.get(BUILD_VERSION_ENV_VAR)
    if build_version is None:
        return None

    build_version = build_version.strip()
    if re.match(BUILD_VERSION_REGEX, build_version):
        return build_version

    logger.warning('A build version with an invalid format was found. Ignoring it.', build_version=build_version)
    return None


def _get_version() -> str:
    """Get the current version from the build version or the default one with a local suffix

    :return: The current databuilder version
    """
    local_version = BASE_VERSION + DEFAULT_VERSION_SUFFIX
    return _get_build_version() or local_version


__version__ = _get_version()
