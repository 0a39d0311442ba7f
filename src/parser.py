from ply import yacc

from ast_nodes import *
from diagnostics import CompileError
from lexer import find_column, make_lexer, tokens

start = 'program'

precedence = (
    ('left', 'OR'),
    ('left', 'AND'),
    ('left', 'EQ', 'NE'),
    ('left', 'LT', 'GT', 'LE', 'GE'),
    ('left', 'PLUS', 'MINUS'),
    ('left', 'TIMES', 'DIV'),
    ('right', 'NOT', 'UMINUS'),
)


def _pos(p, n):
    """(line, column) of the n-th symbol of a production"""
    return p.lineno(n), find_column(p.lexer.lexdata, p.lexpos(n))


# ==================== Program structure ====================

def p_program(p):
    "program : stmt_list"
    p[0] = Program(p[1])

def p_stmt_list_multi(p):
    "stmt_list : stmt_list stmt"
    p[0] = p[1] + [p[2]]

def p_stmt_list_empty(p):
    "stmt_list : "
    p[0] = []

def p_stmt(p):
    """stmt : block
            | if_stmt
            | for_stmt"""
    p[0] = p[1]

def p_stmt_simple(p):
    "stmt : simple_stmt ';'"
    p[0] = p[1]

def p_simple_stmt(p):
    """simple_stmt : var_decl
                   | assign_stmt
                   | print_stmt
                   | read_stmt"""
    p[0] = p[1]

def p_block(p):
    "block : '{' stmt_list '}'"
    p[0] = Block(p[2])

# ==================== Simple statements ====================

def p_var_decl(p):
    "var_decl : VAR IDENT type_name"
    line, col = _pos(p, 2)
    p[0] = VarDecl(p[2], p[3], None, line=line, column=col)

def p_var_decl_init(p):
    "var_decl : VAR IDENT type_name '=' expr"
    line, col = _pos(p, 2)
    p[0] = VarDecl(p[2], p[3], p[5], line=line, column=col)

def p_type_name(p):
    """type_name : INT_TYPE
                 | REAL_TYPE
                 | TEXT_TYPE
                 | BOOL_TYPE"""
    p[0] = p[1]

def p_assign(p):
    "assign_stmt : IDENT '=' expr"
    line, col = _pos(p, 1)
    p[0] = AssignStmt(p[1], p[3], line=line, column=col)

def p_print(p):
    "print_stmt : PRINT '(' expr_list_opt ')'"
    p[0] = PrintStmt(p[3])

def p_read(p):
    "read_stmt : READ '(' ident_list_opt ')'"
    p[0] = ReadStmt(p[3])

def p_expr_list_opt(p):
    """expr_list_opt : expr_list
                     | """
    p[0] = p[1] if len(p) > 1 else []

def p_expr_list_multi(p):
    "expr_list : expr_list ',' expr"
    p[0] = p[1] + [p[3]]

def p_expr_list_single(p):
    "expr_list : expr"
    p[0] = [p[1]]

def p_ident_list_opt(p):
    """ident_list_opt : ident_list
                      | """
    p[0] = p[1] if len(p) > 1 else []

def p_ident_list_multi(p):
    "ident_list : ident_list ',' IDENT"
    line, col = _pos(p, 3)
    p[0] = p[1] + [Ident(p[3], line=line, column=col)]

def p_ident_list_single(p):
    "ident_list : IDENT"
    line, col = _pos(p, 1)
    p[0] = [Ident(p[1], line=line, column=col)]

# ==================== Control flow ====================

def p_if_stmt(p):
    "if_stmt : IF expr block"
    line, col = _pos(p, 1)
    p[0] = IfStmt(p[2], p[3], None, line=line, column=col)

def p_if_else_stmt(p):
    "if_stmt : IF expr block ELSE block"
    line, col = _pos(p, 1)
    p[0] = IfStmt(p[2], p[3], p[5], line=line, column=col)

# para i <= 5 { ... }
def p_for_while(p):
    "for_stmt : FOR expr block"
    line, col = _pos(p, 1)
    p[0] = ForStmt(None, p[2], None, p[3], line=line, column=col)

# para var i inteiro = 0; i < 5; i = i + 1 { ... }
def p_for_classic(p):
    "for_stmt : FOR for_init ';' expr_opt ';' for_step block"
    line, col = _pos(p, 1)
    p[0] = ForStmt(p[2], p[4], p[6], p[7], line=line, column=col)

def p_for_init(p):
    """for_init : var_decl
                | assign_stmt
                | """
    p[0] = p[1] if len(p) > 1 else None

def p_expr_opt(p):
    """expr_opt : expr
                | """
    p[0] = p[1] if len(p) > 1 else None

def p_for_step(p):
    """for_step : assign_stmt
                | """
    p[0] = p[1] if len(p) > 1 else None

# ==================== Expressions ====================

def p_expr_logical(p):
    """expr : expr OR expr
            | expr AND expr"""
    line, col = _pos(p, 2)
    p[0] = LogicalOp(p[2], p[1], p[3], line=line, column=col)

def p_expr_binop(p):
    """expr : expr EQ expr
            | expr NE expr
            | expr LT expr
            | expr GT expr
            | expr LE expr
            | expr GE expr
            | expr PLUS expr
            | expr MINUS expr
            | expr TIMES expr
            | expr DIV expr"""
    line, col = _pos(p, 2)
    p[0] = BinOp(p[2], p[1], p[3], line=line, column=col)

def p_expr_unary(p):
    """expr : MINUS expr %prec UMINUS
            | NOT expr"""
    line, col = _pos(p, 1)
    p[0] = UnaryOp(p[1], p[2], line=line, column=col)

def p_expr_group(p):
    "expr : '(' expr ')'"
    p[0] = Grouping(p[2])

def p_expr_literal(p):
    """expr : INT
            | FLOAT
            | STRING"""
    line, col = _pos(p, 1)
    p[0] = Literal(p[1], line=line, column=col)

def p_expr_bool(p):
    """expr : TRUE
            | FALSE"""
    line, col = _pos(p, 1)
    p[0] = Literal(p[1] == 'verdadeiro', line=line, column=col)

def p_expr_null(p):
    "expr : NULL"
    line, col = _pos(p, 1)
    p[0] = Literal(None, line=line, column=col)

def p_expr_ident(p):
    "expr : IDENT"
    line, col = _pos(p, 1)
    p[0] = Ident(p[1], line=line, column=col)

def p_error(p):
    if p:
        err = SyntaxError(f"unexpected {p.value!r} ({p.type})")
        err.lineno = p.lineno
        err.offset = find_column(p.lexer.lexdata, p.lexpos)
    else:
        err = SyntaxError("unexpected end of input")
    raise err


_parser = None


def _get_parser(debug=False):
    global _parser
    if _parser is None or debug:
        _parser = yacc.yacc(debug=debug, write_tables=False)
    return _parser


def parse(data: str, debug=False) -> Program:
    """
    Parse a whole source text.
    Stops at the first syntax error; raises CompileError('lexical'|'syntax').
    """
    lx = make_lexer()
    try:
        program = _get_parser(debug).parse(data, lexer=lx)
    except SyntaxError as e:
        if lx.errors:
            raise CompileError('lexical', lx.errors) from e
        if e.lineno is None:
            line = data.count('\n') + 1
            e.lineno, e.offset = line, find_column(data, len(data))
        raise CompileError('syntax', [(e.lineno, e.offset, e.msg)]) from e
    if lx.errors:
        raise CompileError('lexical', lx.errors)
    return program
