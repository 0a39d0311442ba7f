"""
Tests for the type model.
"""

import pytest

from my_types import BOOL, ERROR, INT, NULL, REAL, TEXT, Type


class TestPredicates:
    def test_numeric(self):
        assert INT.is_numeric()
        assert REAL.is_numeric()
        for t in (TEXT, BOOL, NULL, ERROR):
            assert not t.is_numeric()

    @pytest.mark.parametrize("a,b", [
        (INT, INT), (INT, REAL), (REAL, INT), (TEXT, TEXT), (BOOL, BOOL),
    ])
    def test_compatible(self, a, b):
        assert a.is_compatible_with(b)

    @pytest.mark.parametrize("a,b", [
        (TEXT, INT), (BOOL, INT), (BOOL, TEXT), (NULL, INT), (REAL, BOOL),
    ])
    def test_incompatible(self, a, b):
        assert not a.is_compatible_with(b)
        assert not b.is_compatible_with(a)


class TestPromotion:
    @pytest.mark.parametrize("a,b,expected", [
        (INT, INT, INT),
        (INT, REAL, REAL),
        (REAL, INT, REAL),
        (REAL, REAL, REAL),
        (ERROR, INT, ERROR),
        (REAL, ERROR, ERROR),
    ])
    def test_promote(self, a, b, expected):
        assert Type.promote(a, b) is expected


class TestConversions:
    @pytest.mark.parametrize("name,expected", [
        ("inteiro", INT), ("real", REAL), ("texto", TEXT), ("booleano", BOOL),
        ("nulo", ERROR), ("float", ERROR),
    ])
    def test_from_name(self, name, expected):
        assert Type.from_name(name) is expected

    @pytest.mark.parametrize("value,expected", [
        (1, INT), (1.5, REAL), ("a", TEXT), (True, BOOL), (False, BOOL), (None, NULL),
    ])
    def test_of_value(self, value, expected):
        assert Type.of_value(value) is expected

    def test_str_is_the_keyword(self):
        assert str(INT) == "inteiro"
        assert f"{ERROR}" == "erro"
