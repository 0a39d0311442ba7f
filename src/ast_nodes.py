from dataclasses import dataclass, field
from typing import List, Optional, Any, Union

# Source position of the node's leading token; not part of node equality
def _pos():
    return field(default=0, compare=False)


@dataclass
class Program:
    stmts: List[Any]
    def __repr__(self): return f"Program({self.stmts})"

# Expressions
@dataclass
class BinOp:
    """Arithmetic, relational and equality operators"""
    op: str
    left: Any
    right: Any
    line: int = _pos()
    column: int = _pos()
    def __repr__(self): return f"BinOp({self.left} {self.op} {self.right})"

@dataclass
class LogicalOp:
    """`&&` / `||`, lowered with short-circuit jumps"""
    op: str
    left: Any
    right: Any
    line: int = _pos()
    column: int = _pos()
    def __repr__(self): return f"Logical({self.left} {self.op} {self.right})"

@dataclass
class UnaryOp:
    op: str           # '-' or '!'
    operand: Any
    line: int = _pos()
    column: int = _pos()
    def __repr__(self): return f"UnaryOp({self.op}{self.operand})"

@dataclass
class Literal:
    value: Union[int, float, str, bool, None]
    line: int = _pos()
    column: int = _pos()
    def __repr__(self): return f"Literal({self.value!r})"

@dataclass
class Grouping:
    inner: Any
    def __repr__(self): return f"Group({self.inner})"

@dataclass
class Ident:
    name: str
    line: int = _pos()
    column: int = _pos()
    def __repr__(self): return f"Ident({self.name})"

# Statements
@dataclass
class Block:
    stmts: List[Any] = field(default_factory=list)
    def __repr__(self): return f"Block({self.stmts})"

@dataclass
class VarDecl:
    name: str
    type_name: str    # 'inteiro', 'real', 'texto' or 'booleano'
    init: Optional[Any] = None
    line: int = _pos()
    column: int = _pos()
    def __repr__(self): return f"Var({self.name}: {self.type_name} = {self.init})"

@dataclass
class AssignStmt:
    name: str
    expr: Any
    line: int = _pos()
    column: int = _pos()
    def __repr__(self): return f"Assign({self.name} = {self.expr})"

@dataclass
class IfStmt:
    cond: Any
    then_branch: Any
    else_branch: Optional[Any] = None
    line: int = _pos()
    column: int = _pos()
    def __repr__(self): return f"If({self.cond}, then={self.then_branch}, else={self.else_branch})"

@dataclass
class ForStmt:
    """
    All three header parts are optional:
    - init present: classic loop
    - init absent, cond present: while-style loop
    - nothing present: infinite loop
    """
    init: Optional[Any]
    cond: Optional[Any]
    step: Optional[Any]
    body: Any
    line: int = _pos()
    column: int = _pos()
    def __repr__(self): return f"For({self.init}; {self.cond}; {self.step}, {self.body})"

@dataclass
class PrintStmt:
    exprs: List[Any]
    def __repr__(self): return f"Print({self.exprs})"

@dataclass
class ReadStmt:
    targets: List[Ident]
    def __repr__(self): return f"Read({[t.name for t in self.targets]})"


EXPR_NODES = (BinOp, LogicalOp, UnaryOp, Literal, Grouping, Ident)
STMT_NODES = (Block, VarDecl, AssignStmt, IfStmt, ForStmt, PrintStmt, ReadStmt)
