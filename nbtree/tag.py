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
Helpers to build trees by hand.

>>> root = tag_compound('root', [
...     tag_int('x', 42),
...     tag_string('s', 'hi'),
...     tag_list('l', TagType.INT, [tag_int('', 1), tag_int('', 2)]),
... ])
>>> [child.name for child in root]
['x', 's', 'l']
>>> [element.value for element in root.get_child('l')]
[1, 2]
"""

from collections.abc import Iterable

from nbtree.node import Node, NodeValue
from nbtree.tag_type import TagType


def _simple_tag(type: TagType, name: str, value: NodeValue) -> Node:
    return Node(type, name, value)


def tag_byte(name: str, value: int) -> Node:
    return _simple_tag(TagType.BYTE, name, value)


def tag_short(name: str, value: int) -> Node:
    return _simple_tag(TagType.SHORT, name, value)


def tag_int(name: str, value: int) -> Node:
    return _simple_tag(TagType.INT, name, value)


def tag_long(name: str, value: int) -> Node:
    return _simple_tag(TagType.LONG, name, value)


def tag_float(name: str, value: float) -> Node:
    return _simple_tag(TagType.FLOAT, name, value)


def tag_double(name: str, value: float) -> Node:
    return _simple_tag(TagType.DOUBLE, name, value)


def tag_byte_array(name: str, value: list[int] | bytes) -> Node:
    if isinstance(value, (bytes, bytearray)):
        value = [b - 256 if b > 127 else b for b in value]
    return _simple_tag(TagType.BYTE_ARRAY, name, value)


def tag_string(name: str, value: str) -> Node:
    return _simple_tag(TagType.STRING, name, value)


def tag_int_array(name: str, value: list[int]) -> Node:
    return _simple_tag(TagType.INT_ARRAY, name, value)


def tag_long_array(name: str, value: list[int]) -> Node:
    return _simple_tag(TagType.LONG_ARRAY, name, value)


def tag_list(name: str, payload_type: TagType, nodes: Iterable[Node]) -> Node:
    """Build a LIST, each node is stripped of its name and type and appended in order."""
    node = Node(TagType.LIST, name, payload_type=payload_type)
    for child in nodes:
        node.add_child(child.make_list_payload())
    return node


def tag_compound(name: str, nodes: Iterable[Node]) -> Node:
    """Build a COMPOUND with the given nodes as its members, names are kept."""
    return Node(TagType.COMPOUND, name, children=nodes)
