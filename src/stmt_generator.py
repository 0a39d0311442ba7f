from typing import Any

from assignment_generator import AssignmentGenerator
from ast_nodes import *
from context import GeneratorContext
from control_flow_generator import ControlFlowGenerator
from expr_generator import ExprGenerator
from misc_generator import MiscGenerator
from tac import CodegenError


class StmtGenerator:
    """Statement generator - dispatches to the sub-generators"""

    def __init__(self, ctx: GeneratorContext):
        self.ctx = ctx
        self.expr_gen = ExprGenerator(ctx)

        self.assign_gen = AssignmentGenerator(self)
        self.flow_gen = ControlFlowGenerator(self)
        self.misc_gen = MiscGenerator(self)

    def gen_stmt(self, stmt: Any):
        """Dispatch on the statement type"""
        if isinstance(stmt, Block):
            # names are flat at this stage, a block is just its statements
            for s in stmt.stmts:
                self.gen_stmt(s)

        elif isinstance(stmt, VarDecl):
            self.assign_gen.generate_decl(stmt)

        elif isinstance(stmt, AssignStmt):
            self.assign_gen.generate_assign(stmt)

        elif isinstance(stmt, IfStmt):
            self.flow_gen.generate_if(stmt)

        elif isinstance(stmt, ForStmt):
            self.flow_gen.generate_for(stmt)

        elif isinstance(stmt, PrintStmt):
            self.misc_gen.generate_print(stmt)

        elif isinstance(stmt, ReadStmt):
            self.misc_gen.generate_read(stmt)

        else:
            raise CodegenError(f"unknown statement node: {type(stmt).__name__}")
