from typing import Any, List, Union

from ast_nodes import *
from diagnostics import Diagnostic, ErrorKind, Severity
from my_types import *
from scope import ScopeManager

ARITHMETIC_OPS = ('+', '-', '*', '/')
RELATIONAL_OPS = ('<', '<=', '>', '>=')
EQUALITY_OPS = ('==', '!=')


class DiagnosticSink:
    """Ordered diagnostic collector shared by the statement and expression passes"""

    def __init__(self):
        self.items: List[Diagnostic] = []

    def error(self, kind: ErrorKind, message: str, node: Any = None):
        self._add(kind, message, node, Severity.ERROR)

    def warning(self, kind: ErrorKind, message: str, node: Any = None):
        self._add(kind, message, node, Severity.WARNING)

    def _add(self, kind, message, node, severity):
        line = getattr(node, 'line', 0) if node is not None else 0
        column = getattr(node, 'column', 0) if node is not None else 0
        self.items.append(Diagnostic(kind, message, line, column, severity))


class ExpressionAnalyzer:
    """Expression typing - used by SemanticAnalyzer"""

    def __init__(self, scope: ScopeManager, sink: DiagnosticSink):
        self.scope = scope
        self.sink = sink

    def analyze(self, expr) -> Type:
        """Expression analysis entry point"""
        method_name = f'_analyze_{expr.__class__.__name__}'
        method = getattr(self, method_name, self._analyze_generic)
        return method(expr)

    def _analyze_generic(self, expr) -> Type:
        raise TypeError(f"unknown expression node: {type(expr).__name__}")

    def _analyze_Literal(self, expr: Literal) -> Type:
        return Type.of_value(expr.value)

    def _analyze_Grouping(self, expr: Grouping) -> Type:
        return self.analyze(expr.inner)

    def _analyze_Ident(self, expr: Ident) -> Type:
        symbol = self.scope.resolve(expr.name)
        if symbol is None:
            self.sink.error(ErrorKind.VARIABLE_NOT_DECLARED,
                            f"variable '{expr.name}' was not declared", expr)
            return ERROR

        # advisory only, the symbol's type is still usable
        if not symbol.initialized:
            self.sink.warning(ErrorKind.VARIABLE_UNINITIALIZED_USE,
                              f"variable '{expr.name}' may be used before being initialized", expr)
        return symbol.type_

    def _analyze_UnaryOp(self, expr: UnaryOp) -> Type:
        operand = self.analyze(expr.operand)

        if expr.op == '!':
            if operand is ERROR:
                return ERROR
            if operand is not BOOL:
                self.sink.error(ErrorKind.INVALID_OPERATION_TYPE,
                                f"operator '!' requires a {BOOL} operand, got {operand}", expr)
                return ERROR
            return BOOL

        if expr.op == '-':
            if operand is ERROR:
                return ERROR
            if not operand.is_numeric():
                self.sink.error(ErrorKind.INVALID_OPERATION_TYPE,
                                f"unary operator '-' requires a numeric operand, got {operand}", expr)
                return ERROR
            return operand

        raise ValueError(f"unknown unary operator: {expr.op}")

    def _analyze_BinOp(self, expr: BinOp) -> Type:
        left = self.analyze(expr.left)
        right = self.analyze(expr.right)

        if expr.op not in ARITHMETIC_OPS + RELATIONAL_OPS + EQUALITY_OPS:
            raise ValueError(f"unknown binary operator: {expr.op}")

        # a reported problem below this node is not reported again
        if left is ERROR or right is ERROR:
            return ERROR

        if expr.op in EQUALITY_OPS:
            if not left.is_compatible_with(right):
                self.sink.error(ErrorKind.TYPE_MISMATCH,
                                f"cannot compare {left} with {right}", expr)
                return ERROR
            return BOOL

        if not (left.is_numeric() and right.is_numeric()):
            self.sink.error(ErrorKind.INVALID_OPERATION_TYPE,
                            f"operator '{expr.op}' requires numeric operands, got {left} and {right}",
                            expr)
            return ERROR

        if expr.op in RELATIONAL_OPS:
            return BOOL
        return Type.promote(left, right)

    def _analyze_LogicalOp(self, expr: LogicalOp) -> Type:
        left = self.analyze(expr.left)
        right = self.analyze(expr.right)
        failed = False

        for side, t in (('left', left), ('right', right)):
            if t is not BOOL and t is not ERROR:
                self.sink.error(ErrorKind.INVALID_OPERATION_TYPE,
                                f"operator '{expr.op}' requires {BOOL} operands, "
                                f"but the {side} side is {t}", expr)
                failed = True

        return ERROR if failed else BOOL


class SemanticAnalyzer:
    """
    Semantic analyzer.
    One pass over the statements; problems are collected, never raised,
    so a single run reports as many independent problems as possible.
    """

    def __init__(self):
        self.scope = ScopeManager()
        self.sink = DiagnosticSink()
        self.expr_analyzer = ExpressionAnalyzer(self.scope, self.sink)

    @property
    def diagnostics(self) -> List[Diagnostic]:
        return list(self.sink.items)

    @property
    def errors(self) -> List[Diagnostic]:
        return [d for d in self.sink.items if d.is_error]

    @property
    def warnings(self) -> List[Diagnostic]:
        return [d for d in self.sink.items if not d.is_error]

    def analyze(self, program: Union[Program, List[Any]]) -> bool:
        """
        Main entry point.
        Returns True when no error was found; warnings do not invalidate.
        """
        self.scope = ScopeManager()
        self.sink = DiagnosticSink()
        self.expr_analyzer = ExpressionAnalyzer(self.scope, self.sink)

        stmts = program.stmts if isinstance(program, Program) else program
        for stmt in stmts or []:
            self._analyze_stmt(stmt)

        return not self.errors

    def _analyze_stmt(self, stmt):
        """Statement dispatch"""
        method_name = f'_analyze_{stmt.__class__.__name__}'
        method = getattr(self, method_name, None)
        if method is None:
            raise TypeError(f"unknown statement node: {type(stmt).__name__}")
        method(stmt)

    def _check_condition(self, cond, keyword: str, stmt):
        cond_type = self.expr_analyzer.analyze(cond)
        if cond_type is not BOOL and cond_type is not ERROR:
            self.sink.error(ErrorKind.INVALID_CONDITION_TYPE,
                            f"condition of '{keyword}' must be {BOOL}, got {cond_type}", stmt)

    def _check_assignable(self, target: Type, value: Type, stmt):
        if target is ERROR or value is ERROR:
            return
        if not target.is_compatible_with(value):
            self.sink.error(ErrorKind.INVALID_ASSIGNMENT_TYPE,
                            f"cannot assign {value} to a variable of type {target}", stmt)

    def _analyze_Block(self, node: Block):
        self.scope.enter_scope()
        for s in node.stmts:
            self._analyze_stmt(s)
        self.scope.exit_scope()

    def _analyze_VarDecl(self, node: VarDecl):
        declared = Type.from_name(node.type_name)

        if not self.scope.declare(node.name, declared, node.init is not None):
            self.sink.error(ErrorKind.VARIABLE_ALREADY_DECLARED,
                            f"variable '{node.name}' was already declared in this scope", node)

        if node.init is not None:
            value = self.expr_analyzer.analyze(node.init)
            self._check_assignable(declared, value, node)

    def _analyze_AssignStmt(self, node: AssignStmt):
        symbol = self.scope.resolve(node.name)
        if symbol is None:
            # the value is not analyzed, to avoid follow-up noise
            self.sink.error(ErrorKind.VARIABLE_NOT_DECLARED,
                            f"variable '{node.name}' was not declared", node)
            return

        value = self.expr_analyzer.analyze(node.expr)
        self._check_assignable(symbol.type_, value, node)
        self.scope.mark_initialized(node.name)

    def _analyze_IfStmt(self, node: IfStmt):
        self._check_condition(node.cond, 'se', node)
        self._analyze_stmt(node.then_branch)
        if node.else_branch is not None:
            self._analyze_stmt(node.else_branch)

    def _analyze_ForStmt(self, node: ForStmt):
        # one scope around the whole loop, for the induction variable
        self.scope.enter_scope()

        if node.init is not None:
            self._analyze_stmt(node.init)
        if node.cond is not None:
            self._check_condition(node.cond, 'para', node)
        if node.step is not None:
            self._analyze_stmt(node.step)
        self._analyze_stmt(node.body)

        self.scope.exit_scope()

    def _analyze_PrintStmt(self, node: PrintStmt):
        """Any type can be printed"""
        for expr in node.exprs:
            self.expr_analyzer.analyze(expr)

    def _analyze_ReadStmt(self, node: ReadStmt):
        for target in node.targets:
            if self.scope.resolve(target.name) is None:
                self.sink.error(ErrorKind.VARIABLE_NOT_DECLARED,
                                f"variable '{target.name}' was not declared", target)
            else:
                self.scope.mark_initialized(target.name)
