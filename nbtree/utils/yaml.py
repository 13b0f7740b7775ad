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
from typing import Any, Optional, Union

import yaml

from nbtree.utils.dict import deep_merge

_EXTENDS_KEY = 'extends'


def _read_mapping(filepath: Path) -> dict[str, Any]:
    if not filepath.is_file():
        raise ValueError(f"'{filepath}' is not a file")
    with filepath.open('r') as fp:
        contents = yaml.safe_load(fp)
    if contents is None:
        return {}
    if not isinstance(contents, dict):
        raise ValueError(f"'{filepath}' cannot be parsed as a dictionary")
    return contents


def dict_from_extended_yaml(*, filepath: Union[Path, str], custom_root: Optional[Path] = None) -> dict[str, Any]:
    """
    Read a yaml mapping, following its 'extends' chain.

    The 'extends' key names another yaml file, relative to the extending file or, when there is no such file, to
    `custom_root`. The extended file is the base and the extending file's keys are deep-merged over it. The key itself
    is not present in the result.
    """
    layers: list[dict[str, Any]] = []
    visited: set[Path] = set()
    current: Optional[Path] = Path(filepath)

    while current is not None:
        resolved = current.resolve()
        if resolved in visited:
            raise ValueError('Cannot parse yaml with recursive extensions.')
        visited.add(resolved)

        contents = _read_mapping(current)
        base_name = contents.pop(_EXTENDS_KEY, None)
        layers.append(contents)

        current = None
        if base_name:
            base = resolved.parent / str(base_name)
            if not base.is_file() and custom_root is not None:
                base = custom_root / str(base_name)
            current = base

    merged: dict[str, Any] = {}
    for layer in reversed(layers):
        merged = deep_merge(merged, layer)
    return merged
