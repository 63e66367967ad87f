import numpy as np
import pandas as pd
import logging
from collections import OrderedDict
from typing import Optional, Sequence

from config.config import PARSER_CONFIG, ENGINE_CONFIG
from core import tokenize, to_postfix, bind, RPNEvaluator, Token

logger = logging.getLogger(__name__)


class ExpressionEngine:

    def __init__(self, cache_size=None, strict_parens=None, right_assoc_pow=None):
        self.rpn_evaluator = RPNEvaluator
        self.cache_size = cache_size if cache_size is not None else ENGINE_CONFIG['cache_size']
        self.strict_parens = (PARSER_CONFIG['strict_parens']
                              if strict_parens is None else strict_parens)
        self.right_assoc_pow = (PARSER_CONFIG['right_assoc_pow']
                                if right_assoc_pow is None else right_assoc_pow)
        # 文本 -> 后缀流 的LRU缓存
        self._compile_cache = OrderedDict()
        self._cache_hits = 0
        self._cache_misses = 0

    def _manage_cache(self):
        """管理缓存大小"""
        while len(self._compile_cache) > self.cache_size:
            # 删除最久未使用的条目
            self._compile_cache.popitem(last=False)

    def clear_cache(self):
        """清空缓存（供外部调用）"""
        self._compile_cache.clear()
        logger.info(f"Cache cleared. Hits: {self._cache_hits}, Misses: {self._cache_misses}")
        self._cache_hits = 0
        self._cache_misses = 0

    @property
    def cache_info(self):
        return {
            'hits': self._cache_hits,
            'misses': self._cache_misses,
            'size': len(self._compile_cache),
        }

    def compile(self, text: str) -> tuple:
        """
        Args:
            text: 中缀表达式文本
        Returns:
            后缀Token元组（不可变，可安全共享）
        """
        if text in self._compile_cache:
            # 移到末尾（最近使用）
            self._compile_cache.move_to_end(text)
            self._cache_hits += 1
            return self._compile_cache[text]

        self._cache_misses += 1
        postfix = tuple(to_postfix(
            tokenize(text),
            strict=self.strict_parens,
            right_assoc_pow=self.right_assoc_pow,
        ))
        self._compile_cache[text] = postfix
        self._manage_cache()
        return postfix

    def calculate(self, text: str) -> float:
        result = self.rpn_evaluator.evaluate(self.compile(text))
        logger.debug(f"{text!r} = {result}")
        return result

    def apply(self, postfix: Sequence[Token], argument: float) -> float:
        """把参数代入函数的后缀流后求值"""
        return self.rpn_evaluator.evaluate(bind(postfix, argument))

    def tabulate(self, postfix: Sequence[Token], start: float, stop: float,
                 count: int, index_name: Optional[str] = None) -> pd.Series:
        """在[start, stop]上等距取count个点计算函数值"""
        if count < 1:
            raise ValueError(f"count must be positive, got {count}")
        with np.errstate(all='ignore'):
            arguments = pd.Series(np.linspace(start, stop, count))
        result = self.rpn_evaluator.evaluate_series(postfix, arguments)
        result.index = pd.Index(arguments.values, name=index_name)
        return result
