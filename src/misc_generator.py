from ast_nodes import *
from tac import TACInstr


class MiscGenerator:
    """I/O statement generator"""

    def __init__(self, stmt_gen):
        self.stmt_gen = stmt_gen
        self.ctx = stmt_gen.ctx
        self.expr_gen = stmt_gen.expr_gen

    def _emit(self, instr: TACInstr):
        self.ctx.emit(instr)

    def generate_print(self, stmt: PrintStmt):
        """One print per argument, left to right"""
        for expr in stmt.exprs:
            value = self.expr_gen.gen_expr(expr)
            self._emit(TACInstr.print_(value))

    def generate_read(self, stmt: ReadStmt):
        for target in stmt.targets:
            self._emit(TACInstr.read(target.name))
