from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple


class ErrorKind(Enum):
    VARIABLE_NOT_DECLARED = 'variable not declared'
    VARIABLE_ALREADY_DECLARED = 'variable already declared'
    VARIABLE_UNINITIALIZED_USE = 'variable used before initialization'
    TYPE_MISMATCH = 'type mismatch'
    INVALID_OPERATION_TYPE = 'invalid operand type'
    INVALID_CONDITION_TYPE = 'invalid condition type'
    INVALID_ASSIGNMENT_TYPE = 'invalid assignment type'


class Severity(Enum):
    ERROR = 'error'
    WARNING = 'warning'


@dataclass(frozen=True)
class Diagnostic:
    """One semantic problem, positioned at a token when one is known (0 otherwise)"""
    kind: ErrorKind
    message: str
    line: int = 0
    column: int = 0
    severity: Severity = Severity.ERROR

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    def format(self) -> str:
        return f"[line {self.line}, column {self.column}] {self.severity.value}: {self.message}"

    def __str__(self):
        return self.format()


class CompileError(Exception):
    """Compilation stopped; `problems` holds (line, column, message) triples"""

    def __init__(self, stage: str, problems: List[Tuple[int, int, str]]):
        self.stage = stage
        self.problems = list(problems)
        super().__init__(f"{stage} failed with {len(self.problems)} error(s)")

    def report(self) -> List[str]:
        return [f"[line {line}, column {col}] {self.stage} error: {msg}"
                for line, col, msg in self.problems]


class SemanticError(CompileError):
    """Raised by the pipeline when semantic analysis reported errors"""

    def __init__(self, diagnostics: List[Diagnostic]):
        self.diagnostics = list(diagnostics)
        errors = [d for d in self.diagnostics if d.is_error]
        super().__init__("semantic", [(d.line, d.column, d.message) for d in errors])

    def report(self) -> List[str]:
        return [d.format() for d in self.diagnostics if d.is_error]
