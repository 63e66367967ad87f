"""函数绑定 - 把后缀流中的变量替换为具体数值"""
from core.token_system import Token


def bind(token_sequence, value):
    """
    每个变量Token（不论名字）都替换为同一个值，其余Token原样保留。
    结果与输入等长，可直接交给求值器。
    """
    bound = Token.number(value)
    return [bound if token.is_variable else token for token in token_sequence]
