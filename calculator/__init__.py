"""计算器模块 - 编译缓存和一站式求值"""
from .expression import ExpressionEngine

__all__ = ['ExpressionEngine']
