"""
Tests for the scope manager.
"""

from my_types import INT, REAL, TEXT
from scope import ScopeManager


class TestDeclareResolve:
    def test_declare_and_resolve(self):
        scope = ScopeManager()
        assert scope.declare('x', INT)
        symbol = scope.resolve('x')
        assert symbol.name == 'x'
        assert symbol.type_ is INT
        assert not symbol.initialized

    def test_unknown_name(self):
        assert ScopeManager().resolve('nada') is None

    def test_redeclare_in_same_scope(self):
        scope = ScopeManager()
        assert scope.declare('x', INT)
        assert not scope.declare('x', REAL)
        assert scope.resolve('x').type_ is INT

    def test_shadowing_in_inner_scope(self):
        scope = ScopeManager()
        scope.declare('x', INT)
        scope.enter_scope()
        assert scope.declare('x', TEXT)
        assert scope.resolve('x').type_ is TEXT
        scope.exit_scope()
        assert scope.resolve('x').type_ is INT

    def test_outer_names_visible(self):
        scope = ScopeManager()
        scope.declare('g', INT, initialized=True)
        scope.enter_scope()
        scope.enter_scope()
        assert scope.resolve('g').initialized

    def test_inner_names_disappear(self):
        scope = ScopeManager()
        scope.enter_scope()
        scope.declare('tmp', INT)
        scope.exit_scope()
        assert scope.resolve('tmp') is None


class TestDepth:
    def test_global_never_popped(self):
        scope = ScopeManager()
        scope.declare('x', INT)
        scope.exit_scope()
        scope.exit_scope()
        assert scope.depth() == 1
        assert scope.is_global()
        assert scope.resolve('x') is not None

    def test_depth_tracks_nesting(self):
        scope = ScopeManager()
        scope.enter_scope()
        scope.enter_scope()
        assert scope.depth() == 3
        assert not scope.is_global()
        scope.exit_scope()
        assert scope.depth() == 2

    def test_current_names(self):
        scope = ScopeManager()
        scope.declare('a', INT)
        scope.enter_scope()
        scope.declare('b', INT)
        assert scope.current_names() == ['b']


class TestInitialization:
    def test_mark_initialized_finds_outer_symbol(self):
        scope = ScopeManager()
        scope.declare('x', INT)
        scope.enter_scope()
        scope.mark_initialized('x')
        scope.exit_scope()
        assert scope.resolve('x').initialized

    def test_mark_initialized_marks_innermost_only(self):
        scope = ScopeManager()
        scope.declare('x', INT)
        scope.enter_scope()
        scope.declare('x', INT)
        scope.mark_initialized('x')
        scope.exit_scope()
        assert not scope.resolve('x').initialized

    def test_mark_unknown_is_silent(self):
        ScopeManager().mark_initialized('fantasma')

    def test_repr_lists_scopes(self):
        scope = ScopeManager()
        scope.declare('x', INT, initialized=True)
        scope.declare('y', REAL)
        assert "scope 0: {x: inteiro, y: real?}" in repr(scope)
