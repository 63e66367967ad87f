"""核心模块 - Token系统、词法分析、调度场、RPN评估器和函数绑定"""
from .errors import (
    ExpressionError, InvalidToken, StackUnderflow, MalformedExpression,
    UnbalancedParens, FunctionDefinitionError
)
from .token_system import (
    TokenType, Op, Token, PRECEDENCE, OPEN_PAREN, CLOSE_PAREN,
    SINGLE_CHAR_TOKENS, RPNValidator
)
from .tokenizer import tokenize
from .parser import to_postfix
from .rpn_evaluator import RPNEvaluator, evaluate
from .binder import bind
from .operators import Operators

__all__ = [
    'ExpressionError', 'InvalidToken', 'StackUnderflow', 'MalformedExpression',
    'UnbalancedParens', 'FunctionDefinitionError',
    'TokenType', 'Op', 'Token', 'PRECEDENCE', 'OPEN_PAREN', 'CLOSE_PAREN',
    'SINGLE_CHAR_TOKENS', 'RPNValidator',
    'tokenize', 'to_postfix', 'RPNEvaluator', 'evaluate', 'bind', 'Operators'
]
