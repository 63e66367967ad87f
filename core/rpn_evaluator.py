"""RPN表达式求值器 - 调用统一的Operators类"""
import numpy as np
import pandas as pd
import logging

from core.errors import InvalidToken, StackUnderflow, MalformedExpression
from core.token_system import TokenType
from core.operators import Operators

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估后缀Token流的值"""

    @staticmethod
    def _reduce(token_sequence, operand_for):
        """
        单栈规约的公共部分
        Args:
            token_sequence: 后缀Token序列
            operand_for: 把值/变量Token映射为操作数的函数，不接受时抛InvalidToken
        Returns:
            栈中唯一剩余的值
        """
        stack = []

        for token in token_sequence:
            if token.type == TokenType.OPERATOR:
                if len(stack) < 2:
                    logger.debug(f"Insufficient operands for {token.name}")
                    raise StackUnderflow(token.name)
                # 先弹出的是右操作数
                right = stack.pop()
                left = stack.pop()
                stack.append(Operators.apply(token.op, left, right))
            elif token.type in (TokenType.VALUE, TokenType.VARIABLE):
                stack.append(operand_for(token))
            else:
                raise InvalidToken(token.name)

        if len(stack) != 1:
            logger.debug(f"Stack has {len(stack)} elements after evaluation, expected 1")
            raise MalformedExpression(len(stack))
        return stack[0]

    @staticmethod
    def evaluate(token_sequence):
        """
        评估不含括号和变量的后缀流
        Returns:
            float结果（可能是inf或NaN）
        """
        def operand_for(token):
            if token.type != TokenType.VALUE:
                raise InvalidToken(token.name)
            return np.float64(token.value)

        result = RPNEvaluator._reduce(token_sequence, operand_for)
        return float(result)

    @staticmethod
    def evaluate_series(token_sequence, arguments):
        """
        把变量替换为一列参数值后向量化求值
        Args:
            token_sequence: 含变量的后缀流（所有变量名共享同一参数）
            arguments: 参数值的Series或数组
        Returns:
            与参数索引对齐的结果Series
        """
        if not isinstance(arguments, pd.Series):
            arguments = pd.Series(np.asarray(arguments, dtype=float))
        arguments = arguments.astype(float)

        def operand_for(token):
            if token.type == TokenType.VARIABLE:
                return arguments
            return np.float64(token.value)

        result = RPNEvaluator._reduce(token_sequence, operand_for)

        # 不含变量的流得到标量，扩展到参数索引上
        if not isinstance(result, pd.Series):
            result = pd.Series(float(result), index=arguments.index)
        return result.rename(None)


def evaluate(token_sequence):
    return RPNEvaluator.evaluate(token_sequence)
