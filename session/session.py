"""交互会话 - 命令分派和读取/求值循环"""
import re
import logging
from typing import Callable, Iterable, Optional

from config.config import SESSION_CONFIG
from core import ExpressionError, FunctionDefinitionError, RPNValidator
from calculator import ExpressionEngine
from session.function_slot import FunctionSlot
from utils.formatting import format_result, format_table

logger = logging.getLogger(__name__)

CALL_PATTERN = re.compile(r'^([A-Za-z]+)\s*\((.*)\)$', re.DOTALL)


class SessionExit(Exception):
    """收到退出命令"""


class CalculatorSession:
    """
    宿主层的胶水代码：
      define=<expr>            定义 f
      f(<expr>) / apply(<expr>) 计算参数后代入 f
      table(<a>, <b>, <n>)     在[a, b]上等距取n个点列出 f 的值
      exit                     结束会话
    其余输入按普通表达式求值。
    """

    def __init__(self, engine=None, slot=None, config=None):
        self.config = dict(SESSION_CONFIG)
        if config:
            self.config.update(config)
        self.engine = engine or ExpressionEngine()
        self.slot = slot if slot is not None else FunctionSlot(self.config['function_name'])

    def handle_line(self, line: str) -> Optional[str]:
        """
        处理一行输入
        Returns:
            要显示的文本；空行返回None
        Raises:
            SessionExit: 退出命令
            ExpressionError: 任何求值错误
        """
        text = line.strip()
        if not text:
            return None

        if text == self.config['exit_command']:
            raise SessionExit()

        prefix = self.config['define_prefix']
        if text.startswith(prefix):
            return self._define(text[len(prefix):])

        match = CALL_PATTERN.match(text)
        if match:
            name, inner = match.group(1), match.group(2)
            if name in self.config['apply_names']:
                return self._apply(inner)
            if name == self.config['table_name']:
                return self._table(inner)

        return format_result(self.engine.calculate(text))

    def _define(self, body):
        postfix = self.engine.compile(body)
        variables = RPNValidator.variables(postfix)
        if not variables:
            raise FunctionDefinitionError(f"Definition {body.strip()!r} has no variable")
        if len(variables) > 1:
            # 单参数函数：所有变量名都绑定到同一个参数
            logger.warning(f"Definition uses {len(variables)} variable names {variables}; "
                           f"all will receive the same argument")
        RPNValidator.check(postfix, allow_variables=True)

        self.slot.define(postfix, body.strip(), variables)
        logger.info(f"Defined {self.slot.signature()} = {body.strip()}")
        return f"{self.slot.signature()} = {body.strip()}"

    def _apply(self, inner):
        postfix = self.slot.postfix
        argument = self.engine.calculate(inner)
        return format_result(self.engine.apply(postfix, argument))

    def _table(self, inner):
        postfix = self.slot.postfix
        parts = inner.split(',')
        if len(parts) != 3:
            raise ExpressionError(f"{self.config['table_name']} expects start, stop, count")

        start, stop, count = (self.engine.calculate(part) for part in parts)
        if not float(count).is_integer() or count < 1:
            raise ExpressionError(f"Row count must be a positive integer, got {count}")
        if count > self.config['max_table_rows']:
            raise ExpressionError(f"Row count {int(count)} exceeds limit "
                                  f"{self.config['max_table_rows']}")

        series = self.engine.tabulate(postfix, start, stop, int(count))
        return format_table(series, self.slot.name)

    def run(self, line_source: Iterable[str], result_sink: Callable[[str], None]) -> int:
        """
        逐行处理直到exit或输入结束；错误只报告，不中断循环
        Returns:
            处理的非空行数
        """
        handled = 0
        logger.info("Session started")
        for line in line_source:
            try:
                output = self.handle_line(line)
            except SessionExit:
                logger.info("Exit command received")
                break
            except ExpressionError as e:
                logger.warning(f"Rejected input {line.strip()!r}: {e}")
                result_sink(f"Error: {e}")
                handled += 1
                continue

            if output is not None:
                result_sink(output)
                handled += 1
        logger.info(f"Session finished after {handled} inputs")
        return handled
