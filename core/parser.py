"""中缀转后缀 - 调度场算法"""
import logging

from core.errors import UnbalancedParens
from core.token_system import Op, TokenType
from utils.formatting import format_postfix

logger = logging.getLogger(__name__)


def _should_pop(top_op, op, right_assoc_pow):
    """栈顶操作符是否先于当前操作符输出"""
    if right_assoc_pow and op == Op.POW and top_op == Op.POW:
        return False
    # 相同优先级一律先出栈：所有操作符默认左结合，2^2^3 == (2^2)^3
    return top_op.precedence >= op.precedence


def to_postfix(tokens, strict=False, right_assoc_pow=False):
    """
    把中缀Token序列转换为后缀(RPN)顺序
    Args:
        tokens: 中缀Token序列，不会被修改
        strict: 括号不匹配时抛出UnbalancedParens；否则多余的')'被吸收，
            剩余的'('原样留在输出里由求值器拒绝
        right_assoc_pow: '^'改为右结合
    Returns:
        新的后缀Token列表
    """
    output = []
    operator_stack = []

    for token in tokens:
        if token.type in (TokenType.VALUE, TokenType.VARIABLE):
            output.append(token)

        elif token.type == TokenType.OPERATOR:
            while operator_stack and operator_stack[-1].is_operator:
                if not _should_pop(operator_stack[-1].op, token.op, right_assoc_pow):
                    break
                output.append(operator_stack.pop())
            operator_stack.append(token)

        elif token.type == TokenType.OPEN_PAREN:
            operator_stack.append(token)

        elif token.type == TokenType.CLOSE_PAREN:
            matched = False
            while operator_stack:
                top = operator_stack.pop()
                if top.type == TokenType.OPEN_PAREN:
                    matched = True
                    break
                output.append(top)
            if not matched:
                if strict:
                    raise UnbalancedParens("unmatched ')'")
                logger.debug("Absorbed unmatched ')'")

        else:
            raise TypeError(f"Unhandled token type: {token.type}")

    while operator_stack:
        top = operator_stack.pop()
        if top.type == TokenType.OPEN_PAREN and strict:
            raise UnbalancedParens("unclosed '('")
        output.append(top)

    logger.debug(f"Postfix: {format_postfix(output)}")
    return output
