"""core/token_system.py"""
from enum import Enum

from core.errors import InvalidToken, StackUnderflow, MalformedExpression


class TokenType(Enum):
    VALUE = "value"  # 数字
    VARIABLE = "variable"  # 变量（未绑定的参数槽）
    OPERATOR = "operator"  # 二元操作符
    OPEN_PAREN = "open_paren"
    CLOSE_PAREN = "close_paren"


class Op(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    POW = "^"

    @property
    def symbol(self):
        return self.value

    @property
    def precedence(self):
        return PRECEDENCE[self]


# 优先级表（固定的全序）
PRECEDENCE = {
    Op.ADD: 1,
    Op.SUB: 1,
    Op.MUL: 2,
    Op.DIV: 2,
    Op.POW: 3,
}


class Token:
    """不可变的Token值对象，按值比较"""

    __slots__ = ('type', 'name', 'value', 'op')

    def __init__(self, token_type, name, value=None, op=None):
        object.__setattr__(self, 'type', token_type)
        object.__setattr__(self, 'name', name)
        object.__setattr__(self, 'value', value)
        object.__setattr__(self, 'op', op)

    def __setattr__(self, key, value):
        raise AttributeError(f"Token is immutable, cannot set '{key}'")

    @classmethod
    def number(cls, x):
        x = float(x)
        return cls(TokenType.VALUE, repr(x), value=x)

    @classmethod
    def variable(cls, name):
        return cls(TokenType.VARIABLE, name)

    @classmethod
    def operator(cls, op):
        return OPERATOR_TOKENS[op.symbol]

    @property
    def is_value(self):
        return self.type == TokenType.VALUE

    @property
    def is_variable(self):
        return self.type == TokenType.VARIABLE

    @property
    def is_operator(self):
        return self.type == TokenType.OPERATOR

    def _key(self):
        return (self.type, self.name, self.value, self.op)

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        if self.type == TokenType.VALUE:
            return f"Value({self.value!r})"
        if self.type == TokenType.VARIABLE:
            return f"Variable({self.name!r})"
        if self.type == TokenType.OPERATOR:
            return f"Operator({self.op.name})"
        return "OpenParen" if self.type == TokenType.OPEN_PAREN else "CloseParen"


OPEN_PAREN = Token(TokenType.OPEN_PAREN, '(')
CLOSE_PAREN = Token(TokenType.CLOSE_PAREN, ')')

# 单字符Token定义：遇到即输出
OPERATOR_TOKENS = {op.symbol: Token(TokenType.OPERATOR, op.symbol, op=op) for op in Op}
SINGLE_CHAR_TOKENS = dict(OPERATOR_TOKENS)
SINGLE_CHAR_TOKENS['('] = OPEN_PAREN
SINGLE_CHAR_TOKENS[')'] = CLOSE_PAREN


class RPNValidator:
    """后缀Token流的结构检查，只模拟栈深度，不做算术"""

    @staticmethod
    def variables(token_sequence):
        """按首次出现顺序返回不重复的变量名"""
        names = []
        for token in token_sequence:
            if token.is_variable and token.name not in names:
                names.append(token.name)
        return names

    @staticmethod
    def check(token_sequence, allow_variables=True):
        """
        按求值器的规则检查后缀流，失败时抛出与求值器相同的异常
        Args:
            token_sequence: 后缀Token序列
            allow_variables: 变量是否视为操作数（函数定义时为True）
        """
        stack_size = 0
        for token in token_sequence:
            if token.is_value or (allow_variables and token.is_variable):
                stack_size += 1
            elif token.is_operator:
                if stack_size < 2:
                    raise StackUnderflow(token.name)
                stack_size -= 1
            else:
                raise InvalidToken(token.name)
        if stack_size != 1:
            raise MalformedExpression(stack_size)
