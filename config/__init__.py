"""配置模块"""
from .config import PARSER_CONFIG, ENGINE_CONFIG, SESSION_CONFIG, LOGGING_CONFIG, validate_config

__all__ = ['PARSER_CONFIG', 'ENGINE_CONFIG', 'SESSION_CONFIG', 'LOGGING_CONFIG', 'validate_config']
