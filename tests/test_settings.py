import pytest

from fsaccess.settings import Settings
from fsaccess.types import FilterType


def test_default_filter_is_visible():
    assert Settings().current_filter_type is FilterType.VISIBLE


def test_change_filter_mode():
    settings = Settings()
    settings.change_filter_mode(FilterType.NON_UTILITY)
    assert settings.current_filter_type is FilterType.NON_UTILITY
    settings.change_filter_mode(FilterType.ALL)
    assert settings.current_filter_type is FilterType.ALL


def test_change_filter_mode_accepts_integer():
    settings = Settings()
    settings.change_filter_mode(2)
    assert settings.current_filter_type is FilterType.NON_UTILITY


def test_change_filter_mode_rejects_unknown_value():
    settings = Settings()
    with pytest.raises(ValueError):
        settings.change_filter_mode(7)
    assert settings.current_filter_type is FilterType.VISIBLE


def test_instances_are_independent():
    first, second = Settings(), Settings()
    first.change_filter_mode(FilterType.ALL)
    assert second.current_filter_type is FilterType.VISIBLE