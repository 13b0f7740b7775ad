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
from pathlib import Path
from typing import NamedTuple, Optional

from structlog import get_logger

from nbtree.conf.settings import NbtSettings
from nbtree.utils.yaml import dict_from_extended_yaml

logger = get_logger()

CONFIG_YAML_ENV_VAR = 'NBTREE_CONFIG_YAML'


class _SettingsMetadata(NamedTuple):
    source: str
    settings: NbtSettings


_settings_singleton: Optional[_SettingsMetadata] = None


def get_global_settings() -> NbtSettings:
    """
    Returns the settings used when a caller does not pass its own.

    The settings are read from the yaml filepath in the 'NBTREE_CONFIG_YAML' env var, or from the bundled default.yml
    when it is not set. They are loaded once, later calls return the same instance.
    """
    from nbtree.conf import DEFAULT_SETTINGS_FILEPATH
    settings_yaml_filepath = os.environ.get(CONFIG_YAML_ENV_VAR, DEFAULT_SETTINGS_FILEPATH)
    return _load_settings_singleton(settings_yaml_filepath)


def load_yaml_settings(filepath: str) -> NbtSettings:
    """Load and validate settings from a yaml file, which may use the `extends` key."""
    settings_dict = dict_from_extended_yaml(filepath=filepath, custom_root=Path(__file__).parent)
    return NbtSettings.model_validate(settings_dict)


def _load_settings_singleton(source: str) -> NbtSettings:
    global _settings_singleton

    if _settings_singleton is not None:
        if _settings_singleton.source != source:
            raise Exception('loading config twice with a different file')
        return _settings_singleton.settings

    settings = load_yaml_settings(source)
    logger.new().debug('settings loaded', source=source)
    _settings_singleton = _SettingsMetadata(source=source, settings=settings)
    return settings
