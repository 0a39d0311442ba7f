import re

from ply import lex

reserved = {
    'var': 'VAR',
    'inteiro': 'INT_TYPE',
    'real': 'REAL_TYPE',
    'texto': 'TEXT_TYPE',
    'booleano': 'BOOL_TYPE',
    'se': 'IF',
    'senao': 'ELSE',
    'para': 'FOR',
    'imprimir': 'PRINT',
    'ler': 'READ',
    'verdadeiro': 'TRUE',
    'falso': 'FALSE',
    'nulo': 'NULL',
}

tokens = [
    'IDENT', 'INT', 'FLOAT', 'STRING',
    'PLUS', 'MINUS', 'TIMES', 'DIV',
    'LT', 'GT', 'LE', 'GE', 'EQ', 'NE',
    'AND', 'OR', 'NOT',
] + sorted(set(reserved.values()))

literals = ['=', ';', ',', '(', ')', '{', '}']

t_LE = r'<='
t_GE = r'>='
t_EQ = r'=='
t_NE = r'!='
t_LT = r'<'
t_GT = r'>'

t_AND = r'&&'
t_OR = r'\|\|'
t_NOT = r'!'

t_PLUS = r'\+'
t_MINUS = r'-'
t_TIMES = r'\*'
t_DIV = r'/'

_ESCAPES = {'"': '"', '\\': '\\', 'n': '\n', 't': '\t'}
_escape_re = re.compile(r'\\(.)', re.DOTALL)


def _unescape(body: str) -> str:
    # unknown escapes are kept as written
    return _escape_re.sub(lambda m: _ESCAPES.get(m.group(1), m.group(0)), body)


def find_column(data: str, lexpos: int) -> int:
    """1-based column of a lexer position"""
    line_start = data.rfind('\n', 0, lexpos) + 1
    return lexpos - line_start + 1


def _error(t, message: str):
    t.lexer.errors.append((t.lineno, find_column(t.lexer.lexdata, t.lexpos), message))


def t_comment(t):
    r'//[^\n]*'
    pass

def t_multiline_comment(t):
    r'/\*(.|\n)*?\*/'
    t.lexer.lineno += t.value.count('\n')
    pass

def t_unterminated_comment(t):
    r'/\*(.|\n)*'
    _error(t, "unterminated block comment")
    t.lexer.lineno += t.value.count('\n')

def t_STRING(t):
    r'"([^"\\]|\\.|\\\n)*"'
    t.lexer.lineno += t.value.count('\n')
    t.value = _unescape(t.value[1:-1])
    return t

def t_unterminated_string(t):
    r'"([^"\\]|\\.|\\\n)*\\?'
    _error(t, "unterminated string")
    t.lexer.lineno += t.value.count('\n')

def t_FLOAT(t):
    r'\d+\.\d+'
    t.value = float(t.value)
    return t

def t_INT(t):
    r'\d+'
    t.value = int(t.value)
    return t

def t_IDENT(t):
    r'[A-Za-z_]\w*'
    t.type = reserved.get(t.value, 'IDENT')
    return t

t_ignore = ' \t\r'

def t_newline(t):
    r'\n+'
    t.lexer.lineno += t.value.count('\n')

def t_error(t):
    char = t.value[0]
    if char in '&|':
        _error(t, f"expected '{char}' after '{char}'")
    else:
        _error(t, f"unexpected character {char!r}")
    t.lexer.skip(1)

lexer = lex.lex()
lexer.errors = []


def make_lexer():
    """Fresh lexer state for one compilation"""
    fresh = lexer.clone()
    fresh.lineno = 1
    fresh.errors = []
    return fresh


def tokenize(data: str):
    """Return (tokens, errors) for a whole source text"""
    lx = make_lexer()
    lx.input(data)
    toks = list(lx)
    for tok in toks:
        tok.column = find_column(data, tok.lexpos)
    return toks, lx.errors
