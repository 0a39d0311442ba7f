from ast_nodes import *
from tac import TACInstr


class ControlFlowGenerator:
    """Control flow generator - if / for lowering"""

    def __init__(self, stmt_gen):
        self.stmt_gen = stmt_gen
        self.ctx = stmt_gen.ctx
        self.expr_gen = stmt_gen.expr_gen

    def _emit(self, instr: TACInstr):
        self.ctx.emit(instr)

    def generate_if(self, stmt: IfStmt):
        """
            if_false cond goto Lelse
            <then>
            goto Lend              (only with an else branch)
          Lelse:
            <else>
          Lend:                    (only with an else branch)
        """
        cond = self.expr_gen.gen_expr(stmt.cond)
        else_label = self.ctx.new_label()
        end_label = self.ctx.new_label()

        self._emit(TACInstr.if_false(cond, else_label))
        self.stmt_gen.gen_stmt(stmt.then_branch)

        if stmt.else_branch is None:
            self._emit(TACInstr.label(else_label))
            return

        self._emit(TACInstr.goto(end_label))
        self._emit(TACInstr.label(else_label))
        self.stmt_gen.gen_stmt(stmt.else_branch)
        self._emit(TACInstr.label(end_label))

    def generate_for(self, stmt: ForStmt):
        """
            <init>
          Lstart:
            if_false cond goto Lend  (only with a condition)
            <body>
            <step>
            goto Lstart
          Lend:
        """
        start_label = self.ctx.new_label()
        end_label = self.ctx.new_label()

        if stmt.init is not None:
            self.stmt_gen.gen_stmt(stmt.init)

        self._emit(TACInstr.label(start_label))
        if stmt.cond is not None:
            cond = self.expr_gen.gen_expr(stmt.cond)
            self._emit(TACInstr.if_false(cond, end_label))

        self.stmt_gen.gen_stmt(stmt.body)
        if stmt.step is not None:
            self.stmt_gen.gen_stmt(stmt.step)

        self._emit(TACInstr.goto(start_label))
        self._emit(TACInstr.label(end_label))
