"""Tests for routelens.__init__ — lazy import registry covers all public names."""


import pytest

import routelens


@pytest.mark.parametrize("name", routelens.__all__)
def test_all_names_resolve(name: str) -> None:
    """Every name in __all__ must resolve via __getattr__ without error."""
    obj = getattr(routelens, name)
    assert obj is not None, f"routelens.{name} resolved to None"


def test_registry_matches_all() -> None:
    assert set(routelens.__all__) == set(routelens._LAZY)


def test_unknown_name_raises_attribute_error() -> None:
    with pytest.raises(AttributeError, match="no attribute"):
        routelens.__getattr__("ThisDoesNotExist")
