"""词法分析 - 把表达式文本切分为Token序列"""
import math
import re
import logging

from core.errors import InvalidToken
from core.token_system import Token, SINGLE_CHAR_TOKENS

logger = logging.getLogger(__name__)

# 十进制字面量；负号总是二元操作符，所以指数部分没有符号
NUMBER_PATTERN = re.compile(r'(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][0-9]+)?')


def flush_literal(buffer):
    """
    把累积的字面量缓冲区转成Token
    Args:
        buffer: 字面量字符串（不含空白）
    Returns:
        Token，缓冲区为空时返回None
    """
    if not buffer:
        return None
    if NUMBER_PATTERN.fullmatch(buffer):
        x = float(buffer)
        # 超出float范围的字面量（如1e400）
        if not math.isfinite(x):
            raise InvalidToken(buffer)
        return Token.number(x)
    if buffer.isalpha():
        return Token.variable(buffer)
    raise InvalidToken(buffer)


def tokenize(text):
    """从左到右扫描，空白字符整体忽略（不作为分隔符）"""
    tokens = []
    buffer = []

    for char in text:
        if char.isspace():
            continue

        token = SINGLE_CHAR_TOKENS.get(char)
        if token is None:
            buffer.append(char)
            continue

        literal = flush_literal(''.join(buffer))
        if literal is not None:
            tokens.append(literal)
        buffer = []
        tokens.append(token)

    literal = flush_literal(''.join(buffer))
    if literal is not None:
        tokens.append(literal)

    logger.debug(f"Tokenized {text!r} into {len(tokens)} tokens")
    return tokens
