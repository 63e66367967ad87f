"""utils/formatting.py"""
import pandas as pd


def format_result(value):
    """使用Python默认的浮点数转文本"""
    return str(float(value))


def format_postfix(token_sequence):
    """后缀流转为空格分隔的文本，例如 '1.0 2.0 +'"""
    return ' '.join(token.name for token in token_sequence)


def format_table(series: pd.Series, function_name='f'):
    """函数值表：每行 'f(x) = y'"""
    lines = []
    for argument, value in series.items():
        lines.append(f"{function_name}({format_result(argument)}) = {format_result(value)}")
    return '\n'.join(lines)
