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
from typing import NamedTuple, Optional

from structlog import get_logger

from databuilder.conf import CONFIG_YAML_ENV_VAR
from databuilder.conf.settings import DataBuilderSettings as Settings
from databuilder.exceptions import DataBuilderError

logger = get_logger()


class _SettingsMetadata(NamedTuple):
    source: Optional[str]
    settings: Settings


_settings_singleton: Optional[_SettingsMetadata] = None


def get_global_settings() -> Settings:
    """
    Returns the settings used by builders created without explicit settings.

    The settings are loaded from the yaml file in the 'DATABUILDER_CONFIG_YAML' env var, if it's not set the default
    settings are used. They are loaded once, loading them again from a different file is an error.
    """
    return _load_settings_singleton(os.environ.get(CONFIG_YAML_ENV_VAR))


def get_settings_source() -> Optional[str]:
    """ Returns the path of the YAML file that was loaded, or None if the default settings are in use.

    XXX: Will raise an assertion error if get_global_settings() wasn't used before.
    """
    assert _settings_singleton is not None, 'get_global_settings() not called before'
    return _settings_singleton.source


def _load_settings_singleton(source: Optional[str]) -> Settings:
    global _settings_singleton

    if _settings_singleton is not None:
        if _settings_singleton.source != source:
            raise DataBuilderError('loading settings twice from a different source')

        return _settings_singleton.settings

    _settings_singleton = _SettingsMetadata(source=source, settings=_load_settings(source))
    return _settings_singleton.settings


def _load_settings(source: Optional[str]) -> Settings:
    if source is None:
        return Settings()

    log = logger.new()
    log.info('loading settings', filepath=source)
    return Settings.from_yaml(filepath=source)
