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

from micheline.conf.settings import CodecSettings
from micheline.exception import InvalidSettingsError

logger = get_logger()

CONFIG_YAML_ENV_VAR = 'MICHELINE_CONFIG_YAML'


class _SettingsMetadata(NamedTuple):
    source: Optional[str]
    settings: CodecSettings


_settings_singleton: Optional[_SettingsMetadata] = None


def get_global_settings() -> CodecSettings:
    """
    Returns the process-wide codec settings.

    They are loaded from the yaml filepath in the 'MICHELINE_CONFIG_YAML' env var. If it's not set, the defaults are
    used. The settings are loaded only once, asking again with a different source is an error.
    """
    return _load_settings_singleton(os.environ.get(CONFIG_YAML_ENV_VAR))


def get_settings_source() -> Optional[str]:
    """ Returns the path of the YAML file that was loaded, or None if the defaults are used.

    XXX: Will raise an assertion error if get_global_settings() wasn't used before.
    """
    assert _settings_singleton is not None, 'get_global_settings() not called before'
    return _settings_singleton.source


def _load_settings_singleton(source: Optional[str]) -> CodecSettings:
    global _settings_singleton

    if _settings_singleton is not None:
        if _settings_singleton.source != source:
            raise InvalidSettingsError('loading config twice with a different file')
        return _settings_singleton.settings

    log = logger.new()
    if source is None:
        settings = CodecSettings()
    else:
        log.debug('loading codec settings', source=source)
        try:
            settings = CodecSettings.from_yaml(filepath=source)
        except ValueError as e:  # pydantic.ValidationError is a ValueError
            raise InvalidSettingsError(f'invalid settings in {source!r}: {e}') from e

    _settings_singleton = _SettingsMetadata(source=source, settings=settings)
    return settings


def _reset_settings_singleton() -> None:
    """Forget the loaded settings, only meant to be used by tests."""
    global _settings_singleton
    _settings_singleton = None
