from ast_nodes import *
from tac import TACInstr


class AssignmentGenerator:
    """Declaration and assignment generator - both end in a COPY"""

    def __init__(self, stmt_gen):
        self.stmt_gen = stmt_gen
        self.ctx = stmt_gen.ctx
        self.expr_gen = stmt_gen.expr_gen

    def _emit(self, instr: TACInstr):
        self.ctx.emit(instr)

    def generate_decl(self, stmt: VarDecl):
        """A declaration without initializer emits nothing"""
        if stmt.init is None:
            return
        value = self.expr_gen.gen_expr(stmt.init)
        self._emit(TACInstr.copy(stmt.name, value))

    def generate_assign(self, stmt: AssignStmt):
        value = self.expr_gen.gen_expr(stmt.expr)
        self._emit(TACInstr.copy(stmt.name, value))
