"""主程序入口 - 交互式计算器"""
import argparse
import logging
import sys

from config.config import *
from calculator import ExpressionEngine
from core import ExpressionError
from session import CalculatorSession
from utils.formatting import format_result

logger = logging.getLogger(__name__)


def read_lines(stream, prompt):
    """逐行读取输入；交互终端下先打印提示符"""
    interactive = stream.isatty()
    while True:
        if interactive:
            print(prompt, end='', flush=True)
        line = stream.readline()
        if not line:
            break
        yield line


def main(args):
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format=LOGGING_CONFIG['format']
    )
    validate_config()

    engine = ExpressionEngine(
        cache_size=ENGINE_CONFIG['cache_size'],
        strict_parens=args.strict_parens or PARSER_CONFIG['strict_parens'],
        right_assoc_pow=args.right_assoc_pow or PARSER_CONFIG['right_assoc_pow'],
    )

    # 单次求值模式
    if args.expression is not None:
        try:
            print(format_result(engine.calculate(args.expression)))
        except ExpressionError as e:
            logger.error(f"Failed to evaluate {args.expression!r}: {e}")
            print(f"Error: {e}", file=sys.stderr)
            return 1
        return 0

    session = CalculatorSession(engine)
    session.run(read_lines(sys.stdin, SESSION_CONFIG['prompt']), print)
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Infix expression calculator")

    parser.add_argument(
        "--expression",
        type=str,
        default=None,
        help="Evaluate a single expression and exit"
    )
    parser.add_argument(
        "--strict_parens",
        action="store_true",
        help="Report unbalanced parentheses instead of silently absorbing them"
    )
    parser.add_argument(
        "--right_assoc_pow",
        action="store_true",
        help="Make '^' right-associative (2^2^3 = 256 instead of 64)"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG['level'],
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level"
    )
    args = parser.parse_args()
    sys.exit(main(args))
