"""会话模块"""
from .function_slot import FunctionSlot
from .session import CalculatorSession, SessionExit

__all__ = ['FunctionSlot', 'CalculatorSession', 'SessionExit']
