"""core/operators.py"""
import numpy as np
import pandas as pd
import logging

from core.token_system import Op

logger = logging.getLogger(__name__)


class Operators:
    """五个二元操作符的静态方法集合，遵循IEEE 754浮点语义（除零得inf/NaN，不抛异常）"""

    @staticmethod
    def _align_operands(operand1, operand2):
        """对齐两个操作数的形状：标量与Series混合时把标量扩展成同索引的Series"""
        if isinstance(operand2, pd.Series) and not isinstance(operand1, pd.Series):
            operand1 = pd.Series(operand1, index=operand2.index, dtype=float)
        elif isinstance(operand1, pd.Series) and not isinstance(operand2, pd.Series):
            operand2 = pd.Series(operand2, index=operand1.index, dtype=float)
        elif not isinstance(operand1, pd.Series):
            operand1 = np.float64(operand1)
            operand2 = np.float64(operand2)
        return operand1, operand2

    @staticmethod
    def add(operand1, operand2):
        """加法操作符"""
        operand1, operand2 = Operators._align_operands(operand1, operand2)
        with np.errstate(all='ignore'):
            return operand1 + operand2

    @staticmethod
    def sub(operand1, operand2):
        """减法操作符"""
        operand1, operand2 = Operators._align_operands(operand1, operand2)
        with np.errstate(all='ignore'):
            return operand1 - operand2

    @staticmethod
    def mul(operand1, operand2):
        """乘法操作符"""
        operand1, operand2 = Operators._align_operands(operand1, operand2)
        with np.errstate(all='ignore'):
            return operand1 * operand2

    @staticmethod
    def div(operand1, operand2):
        """除法：x/0 -> ±inf，0/0 -> NaN"""
        operand1, operand2 = Operators._align_operands(operand1, operand2)
        with np.errstate(all='ignore'):
            return np.divide(operand1, operand2)

    @staticmethod
    def pow(operand1, operand2):
        """实数幂：负底数配非整数指数得NaN，而不是复数"""
        operand1, operand2 = Operators._align_operands(operand1, operand2)
        with np.errstate(all='ignore'):
            return np.power(operand1, operand2)

    @staticmethod
    def apply(op, operand1, operand2):
        """按Op分派"""
        method = OP_METHODS.get(op)
        if method is None:
            raise TypeError(f"Unhandled operator: {op}")
        return method(operand1, operand2)


OP_METHODS = {
    Op.ADD: Operators.add,
    Op.SUB: Operators.sub,
    Op.MUL: Operators.mul,
    Op.DIV: Operators.div,
    Op.POW: Operators.pow,
}
