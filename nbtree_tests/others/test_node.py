import pytest

from nbtree import InvalidNodeError, Node, TagType, tag_compound, tag_int, tag_list, tag_string


def _build_tree() -> Node:
    return tag_compound('root', [
        tag_compound('a', [
            tag_int('x', 1),
            tag_compound('b', [tag_int('target', 2)]),
        ]),
        tag_int('target', 3),
        tag_list('l', TagType.COMPOUND, [tag_compound('', [tag_int('y', 4)])]),
    ])


def test_find_child_by_name_is_pre_order() -> None:
    root = _build_tree()
    assert root.find_child_by_name('target').value == 2
    assert root.find_child_by_name('x').value == 1
    assert root.find_child_by_name('y').value == 4


def test_find_child_by_name_starts_with_self() -> None:
    root = _build_tree()
    assert root.find_child_by_name('root') is root
    leaf = tag_int('leaf', 5)
    assert leaf.find_child_by_name('leaf') is leaf


def test_find_child_by_name_not_found() -> None:
    assert _build_tree().find_child_by_name('missing') is None
    assert tag_int('leaf', 5).find_child_by_name('missing') is None


def test_get_child_is_direct_only() -> None:
    root = _build_tree()
    assert root.get_child('target').value == 3
    assert root.get_child('x') is None


def test_children_order_and_parent() -> None:
    root = _build_tree()
    assert [child.name for child in root.children] == ['a', 'target', 'l']
    assert [child.name for child in root] == ['a', 'target', 'l']
    assert len(root) == 3
    assert all(child.parent is root for child in root)
    assert root.parent is None
    assert not root.is_leaf()
    assert root.get_child('target').is_leaf()


def test_children_cannot_be_mutated_directly() -> None:
    root = _build_tree()
    assert isinstance(root.children, tuple)


def test_add_child_chains() -> None:
    root = Node(TagType.COMPOUND, 'root')
    assert root.add_child(tag_int('a', 1)).add_child(tag_int('b', 2)) is root
    assert [child.name for child in root] == ['a', 'b']


def test_add_child_rejects_owned_nodes() -> None:
    child = tag_int('x', 1)
    tag_compound('first', [child])
    with pytest.raises(InvalidNodeError):
        tag_compound('second', [child])


def test_add_child_rejects_cycles() -> None:
    root = tag_compound('root', [])
    inner = tag_compound('inner', [])
    root.add_child(inner)
    with pytest.raises(InvalidNodeError):
        inner.add_child(root)
    with pytest.raises(InvalidNodeError):
        root.add_child(root)


def test_list_only_takes_list_payloads() -> None:
    node = Node(TagType.LIST, 'l', payload_type=TagType.INT)
    with pytest.raises(InvalidNodeError):
        node.add_child(tag_int('x', 1))
    node.add_child(Node.new_list_payload(1))
    assert len(node) == 1


def test_compound_only_takes_named_tags() -> None:
    node = Node(TagType.COMPOUND, 'c')
    with pytest.raises(InvalidNodeError):
        node.add_child(Node.new_list_payload(1))


@pytest.mark.parametrize('tag_type', [TagType.INT, TagType.STRING, TagType.BYTE_ARRAY])
def test_leaves_take_no_children(tag_type: TagType) -> None:
    with pytest.raises(InvalidNodeError):
        Node(tag_type, 'leaf').add_child(tag_int('x', 1))


def test_type_is_fixed_once_there_are_children() -> None:
    node = tag_compound('c', [tag_int('x', 1)])
    with pytest.raises(InvalidNodeError):
        node.type = TagType.INT
    with pytest.raises(InvalidNodeError):
        node.type = TagType.LIST
    node.type = TagType.COMPOUND
    assert node.type == TagType.COMPOUND

    leaf = Node(TagType.COMPOUND, 'empty')
    leaf.type = TagType.INT
    assert leaf.type == TagType.INT


def test_make_list_payload() -> None:
    node = tag_string('s', 'hi').make_list_payload()
    assert node.is_list_payload
    assert node.type is None
    assert node.name is None
    assert node.value == 'hi'
    with pytest.raises(InvalidNodeError):
        node.name = 'again'
    with pytest.raises(InvalidNodeError):
        node.type = TagType.STRING


def test_make_list_payload_of_compound_member() -> None:
    root = _build_tree()
    with pytest.raises(InvalidNodeError):
        root.get_child('target').make_list_payload()


def test_structural_equality() -> None:
    assert _build_tree() == _build_tree()
    assert tag_int('x', 1) != tag_int('x', 2)
    assert tag_int('x', 1) != tag_int('y', 1)
    assert tag_int('x', 1) != Node(TagType.LONG, 'x', 1)
    assert tag_int('x', 1) != tag_int('x', 1).make_list_payload()
    assert tag_list('l', TagType.INT, []) != tag_list('l', TagType.SHORT, [])
    in_order = tag_compound('c', [tag_int('a', 1), tag_int('b', 2)])
    assert in_order != tag_compound('c', [tag_int('b', 2), tag_int('a', 1)])
    # parent is not part of the comparison
    attached = tag_int('x', 1)
    tag_compound('root', [attached])
    assert attached == tag_int('x', 1)
    assert tag_int('x', 1) != 1


def test_nodes_are_not_hashable() -> None:
    with pytest.raises(TypeError):
        hash(tag_int('x', 1))


def test_empty_node_is_truthy() -> None:
    assert tag_compound('empty', [])


def test_repr() -> None:
    assert repr(tag_int('x', 42)) == "Node(type=INT, name='x', value=42)"
    assert repr(tag_list('l', TagType.BYTE, [])) == "Node(type=LIST, name='l', payload_type=BYTE)"
    assert repr(Node.new_list_payload(1)) == 'Node(list_payload, value=1)'
