"""表达式求值过程中的异常类型"""


class ExpressionError(ValueError):
    """所有表达式错误的基类，宿主捕获后显示，不终止进程"""


class InvalidToken(ExpressionError):
    """字面量既不是数字也不是纯字母变量名，或后缀流中出现了不允许的Token"""

    def __init__(self, text):
        self.text = text
        super().__init__(f"Invalid token: {text!r}")


class StackUnderflow(ExpressionError):
    """操作符规约时栈中操作数不足两个"""

    def __init__(self, operator_symbol=None):
        self.operator_symbol = operator_symbol
        if operator_symbol:
            message = f"Stack underflow: operator '{operator_symbol}' needs two operands"
        else:
            message = "Stack underflow"
        super().__init__(message)


class MalformedExpression(ExpressionError):
    """求值结束后栈中剩余值的数量不是1"""

    def __init__(self, remaining=0):
        self.remaining = remaining
        super().__init__(f"Malformed expression: {remaining} values left on the stack, expected 1")


class UnbalancedParens(ExpressionError):
    """严格模式下括号不匹配"""

    def __init__(self, detail):
        self.detail = detail
        super().__init__(f"Unbalanced parentheses: {detail}")


class FunctionDefinitionError(ExpressionError):
    """函数槽相关的错误（未定义、定义中没有变量）"""
