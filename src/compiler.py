import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from analyzer import SemanticAnalyzer
from ast_nodes import Program
from code_generator import CodeGenerator
from diagnostics import Diagnostic, SemanticError
from parser import parse
from tac import TACInstr, format_program
from visitors import print_ast


@dataclass
class CompileResult:
    program: Program
    diagnostics: List[Diagnostic] = field(default_factory=list)
    instructions: List[TACInstr] = field(default_factory=list)

    @property
    def warnings(self) -> List[Diagnostic]:
        return [d for d in self.diagnostics if not d.is_error]

    def listing(self) -> str:
        return format_program(self.instructions)


class Compiler:
    """Full pipeline: source text -> AST -> semantic check -> TAC"""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = config or {}

        self.show_ast = self.config.get("show_ast", False)
        self.show_warnings = self.config.get("show_warnings", True)

    @staticmethod
    def read_source(source: Union[str, Path]) -> str:
        """Accepts a path to an existing file or the source text itself"""
        if isinstance(source, Path) or (isinstance(source, str) and '\n' not in source
                                        and os.path.isfile(source)):
            with open(source, 'r', encoding='utf-8') as f:
                return f.read()
        return str(source)

    def compile_source(self, source: Union[str, Path]) -> CompileResult:
        """
        Raises CompileError on lexical/syntax errors and SemanticError when
        analysis fails; code generation only runs on a valid program.
        """
        code = self.read_source(source)

        program = parse(code)

        analyzer = SemanticAnalyzer()
        if not analyzer.analyze(program):
            raise SemanticError(analyzer.diagnostics)

        instructions = CodeGenerator().generate(program)
        return CompileResult(program, analyzer.diagnostics, instructions)

    def report(self, result: CompileResult) -> str:
        """Text report of a successful compilation"""
        sections = []
        if self.show_ast:
            sections.append("AST:\n" + print_ast(result.program))
        if self.show_warnings and result.warnings:
            sections.append("\n".join(w.format() for w in result.warnings))
        sections.append(f"{len(result.instructions)} TAC instructions:\n" + result.listing())
        return "\n\n".join(sections)
