import pytest

from fsaccess.filters import filter_all, filter_local, filter_visible, resolve_filter
from fsaccess.types import FilterType


@pytest.mark.parametrize("name", [".", "..", ".hidden", "plain", "a.b"])
def test_filter_all_keeps_everything(name):
    assert filter_all(name) is True


@pytest.mark.parametrize(
    "name, kept",
    [(".", False), ("..", False), (".hidden", False), ("plain", True), ("a.b", True)],
)
def test_filter_visible(name, kept):
    assert filter_visible(name) is kept


@pytest.mark.parametrize(
    "name, kept",
    [
        (".", False),
        ("..", False),
        (".hidden", True),
        ("..x", True),
        ("a", True),
        ("ab", True),
        ("plain", True),
    ],
)
def test_filter_local(name, kept):
    assert filter_local(name) is kept


@pytest.mark.parametrize(
    "filter_type, expected",
    [
        (FilterType.ALL, filter_all),
        (FilterType.VISIBLE, filter_visible),
        (FilterType.NON_UTILITY, filter_local),
        (2, filter_local),
    ],
)
def test_resolve_filter(filter_type, expected):
    assert resolve_filter(filter_type) is expected


def test_resolve_unknown_filter_keeps_everything():
    assert resolve_filter(99) is filter_all