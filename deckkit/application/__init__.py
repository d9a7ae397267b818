"""
Application Layer - 应用服务层

提供牌组类型注册、牌组创建和日志配置服务。
"""

from .types import QueryResult, ResultStatus
from .config_service import DeckConfigService, LoggingConfig, configure_logging

__all__ = [
    'QueryResult', 'ResultStatus',
    'DeckConfigService', 'LoggingConfig', 'configure_logging',
]
