from ast_nodes import *
from context import GeneratorContext
from tac import CodegenError, TACInstr, TACOp, binary_op, unary_op

TRUE = 'true'
FALSE = 'false'


def literal_text(value) -> str:
    """Operand text of a literal value"""
    if value is None:
        return 'null'
    if isinstance(value, bool):
        return TRUE if value else FALSE
    if isinstance(value, str):
        escaped = (value.replace('\\', '\\\\').replace('"', '\\"')
                   .replace('\n', '\\n').replace('\t', '\\t'))
        return f'"{escaped}"'
    if isinstance(value, float):
        return repr(value)
    return str(value)


class ExprGenerator:
    """
    Lowers an expression and returns the operand holding its value:
    the literal text, the variable name, or a fresh temporary.
    Operands are lowered before the operator's own instruction.
    """

    def __init__(self, ctx: GeneratorContext):
        self.ctx = ctx

    def gen_expr(self, expr) -> str:
        if isinstance(expr, Literal):
            return literal_text(expr.value)

        elif isinstance(expr, Ident):
            return expr.name

        elif isinstance(expr, Grouping):
            return self.gen_expr(expr.inner)

        elif isinstance(expr, UnaryOp):
            return self._gen_unary(expr)

        elif isinstance(expr, BinOp):
            return self._gen_binop(expr)

        elif isinstance(expr, LogicalOp):
            return self._gen_logical(expr)

        raise CodegenError(f"unknown expression node: {type(expr).__name__}")

    def _gen_unary(self, expr: UnaryOp) -> str:
        op = unary_op(expr.op)
        operand = self.gen_expr(expr.operand)
        target = self.ctx.new_temp()
        self.ctx.emit(TACInstr.unary(op, target, operand))
        return target

    def _gen_binop(self, expr: BinOp) -> str:
        op = binary_op(expr.op)
        if op in (TACOp.AND, TACOp.OR):
            raise CodegenError(f"logical operator {expr.op!r} in a binary node")
        left = self.gen_expr(expr.left)
        right = self.gen_expr(expr.right)
        target = self.ctx.new_temp()
        self.ctx.emit(TACInstr.binary(op, target, left, right))
        return target

    def _gen_logical(self, expr: LogicalOp) -> str:
        """
        Short-circuit lowering, each occurrence with its own labels.

        a && b:                  a || b:
            if_false a goto Lf       if_true a goto Lt
            if_false b goto Lf       if_true b goto Lt
            t = true                 t = false
            goto Lend                goto Lend
          Lf:                      Lt:
            t = false                t = true
          Lend:                    Lend:
        """
        if expr.op == '&&':
            branch, short_value, fall_value = TACInstr.if_false, FALSE, TRUE
        elif expr.op == '||':
            branch, short_value, fall_value = TACInstr.if_true, TRUE, FALSE
        else:
            raise CodegenError(f"no lowering for logical operator {expr.op!r}")

        left = self.gen_expr(expr.left)
        result = self.ctx.new_temp()
        short_label = self.ctx.new_label()
        end_label = self.ctx.new_label()

        self.ctx.emit(branch(left, short_label))
        right = self.gen_expr(expr.right)
        self.ctx.emit(branch(right, short_label))
        self.ctx.emit(TACInstr.copy(result, fall_value))
        self.ctx.emit(TACInstr.goto(end_label))
        self.ctx.emit(TACInstr.label(short_label))
        self.ctx.emit(TACInstr.copy(result, short_value))
        self.ctx.emit(TACInstr.label(end_label))
        return result
