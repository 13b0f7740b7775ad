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

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional, TypeAlias

from typing_extensions import Self

from nbtree.serialization import InvalidNodeError
from nbtree.tag_type import TagType

# int for BYTE/SHORT/INT/LONG, float for FLOAT/DOUBLE, str for STRING, list[int] for the three array kinds and None for
# LIST and COMPOUND, whose payload lives in the children
NodeValue: TypeAlias = int | float | str | list[int] | None


class Node:
    """ One tag of an NBT tree.

    There are two shapes of node:

    - a named tag: has a `type` and a `name`, this is the root of a tree and every child of a COMPOUND;
    - a list payload: the element of a LIST, it has neither type nor name since both come from the LIST itself (the
      element type is the parent's `payload_type`). `is_list_payload` tells them apart.

    Every node owns its children, a node can only be attached to one parent and the structure is always a tree.
    """

    __slots__ = ('_type', '_name', 'value', 'payload_type', '_is_list_payload', '_parent', '_children')

    def __init__(
        self,
        type: Optional[TagType] = None,
        name: Optional[str] = None,
        value: NodeValue = None,
        *,
        payload_type: Optional[TagType] = None,
        children: Iterable[Node] = (),
    ) -> None:
        self._is_list_payload = False
        self._type = type
        self._name = name
        self.value = value
        self.payload_type = payload_type
        self._parent: Optional[Node] = None
        self._children: list[Node] = []
        for child in children:
            self.add_child(child)

    @classmethod
    def new_list_payload(cls, value: NodeValue = None, *, payload_type: Optional[TagType] = None) -> Self:
        """Create an element for a LIST node."""
        node = cls(value=value, payload_type=payload_type)
        node._is_list_payload = True
        return node

    @property
    def type(self) -> Optional[TagType]:
        return self._type

    @type.setter
    def type(self, type: Optional[TagType]) -> None:
        if self._is_list_payload and type is not None:
            raise InvalidNodeError('a list payload has no type of its own')
        if self._children and type != self._type:
            raise InvalidNodeError('cannot change the type of a node that has children')
        self._type = type

    @property
    def name(self) -> Optional[str]:
        return self._name

    @name.setter
    def name(self, name: Optional[str]) -> None:
        if self._is_list_payload and name is not None:
            raise InvalidNodeError('a list payload has no name of its own')
        self._name = name

    @property
    def is_list_payload(self) -> bool:
        return self._is_list_payload

    @property
    def parent(self) -> Optional[Node]:
        return self._parent

    @property
    def children(self) -> tuple[Node, ...]:
        return tuple(self._children)

    def is_leaf(self) -> bool:
        return not self._children

    def add_child(self, child: Node) -> Self:
        """ Append `child` as the last child of this node and take ownership of it.

        A LIST only accepts list payloads, a COMPOUND only accepts named tags and the other tag kinds have no children.
        A list payload inherits its kind from its LIST, so any child is accepted by it (and by a node with no type yet,
        which is what the decoder fills in).
        """
        if child._parent is not None:
            raise InvalidNodeError('node already belongs to another node')
        ancestor: Optional[Node] = self
        while ancestor is not None:
            if ancestor is child:
                raise InvalidNodeError('a node cannot be its own descendant')
            ancestor = ancestor._parent
        if self._type == TagType.LIST:
            if not child._is_list_payload:
                raise InvalidNodeError('children of a LIST must be list payloads')
        elif self._type == TagType.COMPOUND:
            if child._is_list_payload:
                raise InvalidNodeError('children of a COMPOUND must be named tags')
        elif self._type is not None:
            raise InvalidNodeError(f'a node of type {self._type!r} cannot have children')
        child._parent = self
        self._children.append(child)
        return self

    def make_list_payload(self) -> Self:
        """Strip name and type so this node can be used as a LIST element."""
        if self._parent is not None and not self._is_list_payload:
            raise InvalidNodeError('cannot turn a node that belongs to a COMPOUND into a list payload')
        self._type = None
        self._name = None
        self._is_list_payload = True
        return self

    def find_child_by_name(self, name: str) -> Optional[Node]:
        """ Depth-first search, in pre-order, for the first node named `name`, starting with this node itself.

        Returns None when there is no such node.
        """
        if self._name == name:
            return self
        for child in self._children:
            node = child.find_child_by_name(name)
            if node is not None:
                return node
        return None

    def get_child(self, name: str) -> Optional[Node]:
        """Return the first direct child named `name`, or None."""
        for child in self._children:
            if child._name == name:
                return child
        return None

    def __len__(self) -> int:
        return len(self._children)

    def __iter__(self) -> Iterator[Node]:
        return iter(tuple(self._children))

    def __bool__(self) -> bool:
        # a node with no children is still a node
        return True

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return (
            self._type == other._type
            and self._name == other._name
            and self.value == other.value
            and self.payload_type == other.payload_type
            and self._is_list_payload == other._is_list_payload
            and self._children == other._children
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        fields = []
        if self._is_list_payload:
            fields.append('list_payload')
        if self._type is not None:
            fields.append(f'type={self._type.name}')
        if self._name is not None:
            fields.append(f'name={self._name!r}')
        if self.value is not None:
            fields.append(f'value={self.value!r}')
        if self.payload_type is not None:
            fields.append(f'payload_type={self.payload_type.name}')
        if self._children:
            fields.append(f'children={self._children!r}')
        return f'{type(self).__name__}({", ".join(fields)})'
