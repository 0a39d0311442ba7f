from typing import Any, List, Union

from ast_nodes import Program
from context import GeneratorContext
from stmt_generator import StmtGenerator
from tac import TACInstr


class CodeGenerator:
    """
    TAC generator.
    Expects a program that passed semantic analysis; every call to
    generate() starts from fresh counters, so output is reproducible.
    """

    def __init__(self):
        self.reset()

    def reset(self):
        self.ctx = GeneratorContext()
        self.stmt_gen = StmtGenerator(self.ctx)

    @property
    def instructions(self) -> List[TACInstr]:
        return list(self.ctx.instructions)

    def generate(self, program: Union[Program, List[Any]]) -> List[TACInstr]:
        """Main generation entry point"""
        self.reset()
        stmts = program.stmts if isinstance(program, Program) else program
        for stmt in stmts or []:
            self.stmt_gen.gen_stmt(stmt)
        return list(self.ctx.instructions)
