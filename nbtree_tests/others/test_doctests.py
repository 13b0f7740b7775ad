import doctest
import importlib

import pytest

MODULES_WITH_DOCTESTS = [
    'nbtree.codec',
    'nbtree.tag',
    'nbtree.tag_type',
    'nbtree.serialization.encoding.array',
    'nbtree.serialization.encoding.float',
    'nbtree.serialization.encoding.int',
    'nbtree.serialization.encoding.string',
    'nbtree.utils.dict',
]


@pytest.mark.parametrize('module_name', MODULES_WITH_DOCTESTS)
def test_doctests(module_name: str) -> None:
    module = importlib.import_module(module_name)
    result = doctest.testmod(module)
    assert result.attempted > 0
    assert result.failed == 0
