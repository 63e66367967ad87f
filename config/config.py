"""配置文件"""

# 调度场参数
PARSER_CONFIG = {
    "strict_parens": False,  # True: 括号不匹配时报UnbalancedParens；False: 多余的')'被吸收
    "right_assoc_pow": False,  # 默认'^'左结合：2^2^3 == 64
}

# 表达式引擎参数
ENGINE_CONFIG = {
    "cache_size": 256,  # 编译结果（后缀流）的LRU缓存大小
}

# 交互会话参数
SESSION_CONFIG = {
    "prompt": "> ",
    "exit_command": "exit",
    "define_prefix": "define=",
    "apply_names": ("f", "apply"),  # f(<expr>) 与 apply(<expr>) 等价
    "table_name": "table",
    "max_table_rows": 1000,
    "function_name": "f",
}

# 日志
LOGGING_CONFIG = {
    "level": "WARNING",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert ENGINE_CONFIG["cache_size"] > 0, "cache_size必须为正数"
    assert SESSION_CONFIG["max_table_rows"] > 0, "max_table_rows必须为正数"
    assert SESSION_CONFIG["define_prefix"].endswith("="), "define前缀必须以'='结尾"
    assert SESSION_CONFIG["apply_names"], "至少需要一个函数调用名"
    assert LOGGING_CONFIG["level"] in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
