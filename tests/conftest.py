"""
Pytest configuration and shared fixtures for the Mini-Go tests.
"""

import pytest

from analyzer import SemanticAnalyzer
from code_generator import CodeGenerator
from parser import parse


@pytest.fixture
def parse_source():
    """Factory fixture: source text -> Program."""
    return parse


@pytest.fixture
def analyze():
    """Factory fixture: source text -> analyzer after one analysis run."""

    def _analyze(source: str) -> SemanticAnalyzer:
        analyzer = SemanticAnalyzer()
        analyzer.analyze(parse(source))
        return analyzer

    return _analyze


@pytest.fixture
def tac_lines():
    """Factory fixture: source text -> TAC listing as a list of strings."""

    def _generate(source: str):
        return [str(i) for i in CodeGenerator().generate(parse(source))]

    return _generate


def kinds(diagnostics):
    return [d.kind for d in diagnostics]
