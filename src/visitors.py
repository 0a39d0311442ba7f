from typing import Any

from ast_nodes import *


class ASTPrinter:
    """
    S-expression AST printer:
    - (var x 10), (atrib x (+ x y))
    - (se cond (bloco ...) (bloco ...))
    - (para init ; cond ; inc body), nil / true for absent header parts
    - optional colored output
    """

    def __init__(self, use_colors=False):
        self.use_colors = use_colors

        if use_colors:
            self.colors = {
                'node': '\033[33m',   # yellow - node keyword
                'value': '\033[32m',  # green - literals and names
                'reset': '\033[0m'
            }
        else:
            self.colors = {k: '' for k in ['node', 'value', 'reset']}

    def print(self, node: Any) -> str:
        """Render a node, a statement list or a Program"""
        if node is None:
            return "nulo"
        if isinstance(node, list):
            return "\n".join(self.print(n) for n in node)
        method_name = f'_visit_{node.__class__.__name__}'
        visitor = getattr(self, method_name, None)
        if visitor is None:
            raise TypeError(f"cannot print {type(node).__name__}")
        return visitor(node)

    def _color(self, text: str, color: str) -> str:
        return f"{self.colors[color]}{text}{self.colors['reset']}"

    def _paren(self, head: str, *parts: str) -> str:
        inner = " ".join([self._color(head, 'node'), *parts])
        return f"({inner})"

    def _visit_Program(self, node: Program) -> str:
        return self.print(node.stmts)

    # Expressions

    def _visit_BinOp(self, node: BinOp) -> str:
        return self._paren(node.op, self.print(node.left), self.print(node.right))

    def _visit_LogicalOp(self, node: LogicalOp) -> str:
        return self._paren(node.op, self.print(node.left), self.print(node.right))

    def _visit_UnaryOp(self, node: UnaryOp) -> str:
        return self._paren(node.op, self.print(node.operand))

    def _visit_Grouping(self, node: Grouping) -> str:
        return self._paren("group", self.print(node.inner))

    def _visit_Literal(self, node: Literal) -> str:
        value = node.value
        if value is None:
            text = "nulo"
        elif isinstance(value, bool):
            text = "verdadeiro" if value else "falso"
        elif isinstance(value, str):
            text = f'"{value}"'
        else:
            text = str(value)
        return self._color(text, 'value')

    def _visit_Ident(self, node: Ident) -> str:
        return self._color(node.name, 'value')

    # Statements

    def _visit_Block(self, node: Block) -> str:
        return self._paren("bloco", *[self.print(s) for s in node.stmts])

    def _visit_VarDecl(self, node: VarDecl) -> str:
        parts = [self._color(node.name, 'value')]
        if node.init is not None:
            parts.append(self.print(node.init))
        return self._paren("var", *parts)

    def _visit_AssignStmt(self, node: AssignStmt) -> str:
        return self._paren("atrib", self._color(node.name, 'value'), self.print(node.expr))

    def _visit_IfStmt(self, node: IfStmt) -> str:
        parts = [self.print(node.cond), self.print(node.then_branch)]
        if node.else_branch is not None:
            parts.append(self.print(node.else_branch))
        return self._paren("se", *parts)

    def _visit_ForStmt(self, node: ForStmt) -> str:
        init = self.print(node.init) if node.init is not None else "nil"
        cond = self.print(node.cond) if node.cond is not None else "true"
        step = self.print(node.step) if node.step is not None else "nil"
        return self._paren("para", init, ";", cond, ";", step, self.print(node.body))

    def _visit_PrintStmt(self, node: PrintStmt) -> str:
        return self._paren("imprimir", *[self.print(e) for e in node.exprs])

    def _visit_ReadStmt(self, node: ReadStmt) -> str:
        return self._paren("ler", *[self._color(t.name, 'value') for t in node.targets])


def print_ast(node: Any, use_colors: bool = False) -> str:
    """
    Convenience printer

    Usage:
        from visitors import print_ast
        print(print_ast(program))
    """
    return ASTPrinter(use_colors=use_colors).print(node)
