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

from copy import deepcopy
from typing import Any, TypeVar

K = TypeVar('K')


def deep_merge(base: dict[K, Any], override: dict[K, Any]) -> dict[K, Any]:
    """
    Return a new dict with `override` merged on top of `base`, nested dicts are merged key by key.

    >>> base = dict(MAX_DEPTH=256, extra=dict(a=1, b=2))
    >>> result = deep_merge(base, dict(extra=dict(b=3), STRING_ENCODING='utf-8'))
    >>> result == dict(MAX_DEPTH=256, extra=dict(a=1, b=3), STRING_ENCODING='utf-8')
    True
    >>> base == dict(MAX_DEPTH=256, extra=dict(a=1, b=2))
    True
    """
    merged = deepcopy(base)

    def do_deep_merge(first: dict[K, Any], second: dict[K, Any]) -> dict[K, Any]:
        for key, value in second.items():
            if isinstance(first.get(key), dict) and isinstance(value, dict):
                do_deep_merge(first[key], value)
            else:
                first[key] = value
        return first

    return do_deep_merge(merged, override)
