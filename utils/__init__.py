"""工具模块"""
from .formatting import format_result, format_postfix, format_table

__all__ = ['format_result', 'format_postfix', 'format_table']
