"""单一函数槽 - 保存当前定义的 f"""
import logging

from core import FunctionDefinitionError

logger = logging.getLogger(__name__)


class FunctionSlot:
    """
    最多保存一个后缀流。define 整体替换旧定义；应用时只读不改。
    由会话持有并显式传递，不是进程级单例。
    """

    def __init__(self, name='f'):
        self.name = name
        self._definition = None  # (postfix, source, variables)

    @property
    def is_defined(self):
        return self._definition is not None

    def define(self, postfix, source, variables):
        if self._definition is not None:
            logger.info(f"Replacing {self.name}: {self._definition[1]!r} -> {source!r}")
        self._definition = (tuple(postfix), source, tuple(variables))

    def clear(self):
        self._definition = None

    def _require(self):
        if self._definition is None:
            raise FunctionDefinitionError(f"Function '{self.name}' is not defined")
        return self._definition

    @property
    def postfix(self):
        return self._require()[0]

    @property
    def source(self):
        return self._require()[1]

    @property
    def variables(self):
        return self._require()[2]

    def signature(self):
        return f"{self.name}({', '.join(self.variables)})"
