"""
Tests for the Mini-Go lexer.
"""

import pytest

from lexer import find_column, tokenize


def types_of(source):
    toks, errors = tokenize(source)
    assert errors == []
    return [t.type for t in toks]


class TestTokens:
    def test_declaration(self):
        assert types_of("var x inteiro = 10;") == [
            'VAR', 'IDENT', 'INT_TYPE', '=', 'INT', ';',
        ]

    @pytest.mark.parametrize("word,kind", [
        ("se", 'IF'),
        ("senao", 'ELSE'),
        ("para", 'FOR'),
        ("imprimir", 'PRINT'),
        ("ler", 'READ'),
        ("real", 'REAL_TYPE'),
        ("texto", 'TEXT_TYPE'),
        ("booleano", 'BOOL_TYPE'),
        ("verdadeiro", 'TRUE'),
        ("falso", 'FALSE'),
        ("nulo", 'NULL'),
        ("senaox", 'IDENT'),
    ])
    def test_keywords(self, word, kind):
        assert types_of(word) == [kind]

    def test_operators_prefer_longest_match(self):
        assert types_of("<= >= == != < > ! && ||") == [
            'LE', 'GE', 'EQ', 'NE', 'LT', 'GT', 'NOT', 'AND', 'OR',
        ]

    def test_number_values(self):
        toks, _ = tokenize("42 3.25")
        assert [t.type for t in toks] == ['INT', 'FLOAT']
        assert toks[0].value == 42
        assert toks[1].value == 3.25

    def test_string_escapes(self):
        toks, errors = tokenize(r'"a\"b\n\q"')
        assert errors == []
        assert toks[0].type == 'STRING'
        assert toks[0].value == 'a"b\n\\q'

    def test_comments_are_skipped(self):
        source = "// linha\nvar x inteiro; /* bloco\nde comentario */ x = 1;"
        toks, errors = tokenize(source)
        assert errors == []
        assert [t.type for t in toks] == [
            'VAR', 'IDENT', 'INT_TYPE', ';', 'IDENT', '=', 'INT', ';',
        ]
        assert toks[4].lineno == 3


class TestPositions:
    def test_line_and_column(self):
        toks, _ = tokenize("var x inteiro;\n  y = 1;")
        y = toks[4]
        assert y.value == 'y'
        assert (y.lineno, y.column) == (2, 3)

    def test_find_column(self):
        data = "ab\ncd"
        assert find_column(data, 0) == 1
        assert find_column(data, 4) == 2


class TestErrors:
    def test_unexpected_character(self):
        _, errors = tokenize("var x inteiro = 1 @ 2;")
        assert errors == [(1, 19, "unexpected character '@'")]

    def test_single_ampersand(self):
        _, errors = tokenize("a & b")
        assert len(errors) == 1
        assert errors[0][2] == "expected '&' after '&'"

    def test_single_pipe(self):
        _, errors = tokenize("a | b")
        assert errors[0][2] == "expected '|' after '|'"

    def test_unterminated_string(self):
        _, errors = tokenize('imprimir("abc);')
        assert len(errors) == 1
        assert errors[0][2] == "unterminated string"

    def test_unterminated_comment(self):
        _, errors = tokenize("x = 1; /* nunca fecha")
        assert [e[2] for e in errors] == ["unterminated block comment"]

    def test_errors_do_not_leak_between_runs(self):
        tokenize("@")
        _, errors = tokenize("x = 1;")
        assert errors == []
