# tests/core/memory/test_values.py
"""
Testes da união de valores e das funções de coerção.
"""

import pytest

from atlas_configstore.core.errors import UnsupportedValueError
from atlas_configstore.core.memory.values import (
    as_bool,
    as_float,
    as_int,
    as_string,
    as_string_list,
    check_value,
)


@pytest.mark.parametrize(
    "value",
    ["x", 1, 1.5, True, None, [1, "a", None], {"a": {"b": [1, 2]}}, {}],
)
def test_check_value_accepts_supported_union(value):
    assert check_value(value) is value


def test_check_value_reports_nested_location():
    with pytest.raises(UnsupportedValueError) as exc:
        check_value({"servers": [{"port": object()}]}, where="root")
    assert "root.servers[0].port" in str(exc.value)


def test_check_value_rejects_unhashable_like_keys():
    with pytest.raises(UnsupportedValueError):
        check_value({(1, 2): "tuple key"})


def test_coercions():
    assert as_string(None) is None
    assert as_string(2.5) == "2.5"
    assert as_int(7.99, -1) == 7
    assert as_int(float("nan"), -1) == -1
    assert as_float(False, 9.0) == 9.0
    assert as_bool(1, False) is False
    assert as_string_list(("a",)) is None
    assert as_string_list([True, "x"]) == ["True", "x"]
