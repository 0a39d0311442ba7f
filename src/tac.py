from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional


class CodegenError(Exception):
    """The generator met a node or operator it has no lowering for"""
    pass


class TACOp(Enum):
    # arithmetic
    ADD = '+'
    SUB = '-'
    MUL = '*'
    DIV = '/'
    NEG = 'neg'
    # relational / equality
    LT = '<'
    LE = '<='
    GT = '>'
    GE = '>='
    EQ = '=='
    NE = '!='
    # logical
    AND = '&&'
    OR = '||'
    NOT = '!'
    # assignment
    COPY = '='
    # control
    LABEL = 'label'
    GOTO = 'goto'
    IF_FALSE = 'if_false'
    IF_TRUE = 'if_true'
    # I/O
    PRINT = 'print'
    READ = 'read'


BINARY_OPS = {
    '+': TACOp.ADD, '-': TACOp.SUB, '*': TACOp.MUL, '/': TACOp.DIV,
    '<': TACOp.LT, '<=': TACOp.LE, '>': TACOp.GT, '>=': TACOp.GE,
    '==': TACOp.EQ, '!=': TACOp.NE,
    '&&': TACOp.AND, '||': TACOp.OR,
}

UNARY_OPS = {'-': TACOp.NEG, '!': TACOp.NOT}

ARITHMETIC = (TACOp.ADD, TACOp.SUB, TACOp.MUL, TACOp.DIV, TACOp.NEG)
JUMPS = (TACOp.GOTO, TACOp.IF_FALSE, TACOp.IF_TRUE)


def binary_op(symbol: str) -> TACOp:
    try:
        return BINARY_OPS[symbol]
    except KeyError:
        raise CodegenError(f"no TAC opcode for binary operator {symbol!r}") from None


def unary_op(symbol: str) -> TACOp:
    try:
        return UNARY_OPS[symbol]
    except KeyError:
        raise CodegenError(f"no TAC opcode for unary operator {symbol!r}") from None


@dataclass(frozen=True)
class TACInstr:
    """
    One three-address instruction.
    - binary:  result = arg1 <op> arg2
    - unary:   result = <op>arg1
    - copy:    result = arg1
    - label:   result is the label name
    - goto:    result is the target
    - if_*:    arg1 is tested, result is the target
    - print:   arg1 is printed
    - read:    result receives the value
    """
    op: TACOp
    result: Optional[str] = None
    arg1: Optional[str] = None
    arg2: Optional[str] = None

    # ========== Constructors ==========

    @staticmethod
    def binary(op: TACOp, result: str, arg1: str, arg2: str) -> 'TACInstr':
        return TACInstr(op, result, arg1, arg2)

    @staticmethod
    def unary(op: TACOp, result: str, arg1: str) -> 'TACInstr':
        return TACInstr(op, result, arg1)

    @staticmethod
    def copy(result: str, source: str) -> 'TACInstr':
        return TACInstr(TACOp.COPY, result, source)

    @staticmethod
    def label(name: str) -> 'TACInstr':
        return TACInstr(TACOp.LABEL, name)

    @staticmethod
    def goto(target: str) -> 'TACInstr':
        return TACInstr(TACOp.GOTO, target)

    @staticmethod
    def if_false(cond: str, target: str) -> 'TACInstr':
        return TACInstr(TACOp.IF_FALSE, target, cond)

    @staticmethod
    def if_true(cond: str, target: str) -> 'TACInstr':
        return TACInstr(TACOp.IF_TRUE, target, cond)

    @staticmethod
    def print_(value: str) -> 'TACInstr':
        return TACInstr(TACOp.PRINT, None, value)

    @staticmethod
    def read(name: str) -> 'TACInstr':
        return TACInstr(TACOp.READ, name)

    # ========== Queries ==========

    def is_label(self) -> bool:
        return self.op is TACOp.LABEL

    def is_jump(self) -> bool:
        return self.op in JUMPS

    def is_arithmetic(self) -> bool:
        return self.op in ARITHMETIC

    def __str__(self):
        op = self.op
        if op is TACOp.LABEL:
            return f"{self.result}:"
        if op is TACOp.GOTO:
            return f"goto {self.result}"
        if op is TACOp.IF_FALSE:
            return f"if_false {self.arg1} goto {self.result}"
        if op is TACOp.IF_TRUE:
            return f"if_true {self.arg1} goto {self.result}"
        if op is TACOp.PRINT:
            return f"print {self.arg1}"
        if op is TACOp.READ:
            return f"read {self.result}"
        if op is TACOp.COPY:
            return f"{self.result} = {self.arg1}"
        if op is TACOp.NEG:
            return f"{self.result} = -{self.arg1}"
        if op is TACOp.NOT:
            return f"{self.result} = !{self.arg1}"
        return f"{self.result} = {self.arg1} {op.value} {self.arg2}"


def format_program(instrs: Iterable[TACInstr]) -> str:
    """Numbered listing, one instruction per line"""
    return "\n".join(f"  {i:3d}: {instr}" for i, instr in enumerate(instrs))
