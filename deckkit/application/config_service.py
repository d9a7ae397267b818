"""
DeckConfigService - 配置管理服务

负责集中管理进程内配置，包括：
- 按名称注册的牌组类型
- 日志配置

不读取配置文件和环境变量。
"""

import logging
import random
from dataclasses import dataclass
from typing import Dict, List, Optional

from ..core.deck import Deck, DeckType, PLAIN_DECK, JOKER_DECK
from ..core.exceptions import DeckConfigError, UnknownDeckTypeError
from .types import QueryResult

LOGGER_NAMESPACE = "deckkit"


@dataclass
class LoggingConfig:
    """日志配置"""
    log_level: str = 'INFO'
    enable_console_logging: bool = True
    log_format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    def __post_init__(self):
        """验证日志级别"""
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise DeckConfigError(f"无效的日志级别: {self.log_level}",
                                  error_code="INVALID_LOG_LEVEL")


def configure_logging(config: LoggingConfig) -> logging.Logger:
    """
    把日志配置应用到deckkit日志命名空间

    重复调用只会替换之前安装的处理器，不会叠加。

    Args:
        config: 日志配置

    Returns:
        deckkit根日志器
    """
    package_logger = logging.getLogger(LOGGER_NAMESPACE)
    package_logger.setLevel(config.log_level.upper())

    for handler in list(package_logger.handlers):
        if getattr(handler, '_deckkit_handler', False):
            package_logger.removeHandler(handler)

    if config.enable_console_logging:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(config.log_format))
        handler._deckkit_handler = True
        package_logger.addHandler(handler)

    return package_logger


class DeckConfigService:
    """配置管理服务"""

    def __init__(self):
        """初始化配置服务"""
        self.logger = logging.getLogger(__name__)
        self._deck_types: Dict[str, DeckType] = {}
        self._logging_configs: Dict[str, LoggingConfig] = {}
        self._load_default_configs()

    def _load_default_configs(self):
        """加载默认配置"""
        self._deck_types = {
            'plain': PLAIN_DECK,
            'joker': JOKER_DECK,
        }
        self._logging_configs = {
            'default': LoggingConfig(),
            'debug': LoggingConfig(log_level='DEBUG'),
            'quiet': LoggingConfig(log_level='WARNING', enable_console_logging=False),
        }
        self.logger.debug("默认配置加载完成")

    def register_deck_type(self, key: str, deck_type: DeckType,
                           replace: bool = False) -> QueryResult[bool]:
        """
        注册牌组类型

        Args:
            key: 注册名
            deck_type: 牌组类型
            replace: 是否允许覆盖已有注册

        Returns:
            查询结果，包含注册是否成功
        """
        if not isinstance(deck_type, DeckType):
            return QueryResult.validation_error(
                f"牌组类型必须是DeckType，实际: {type(deck_type)}",
                error_code="INVALID_DECK_TYPE"
            )
        if not key:
            return QueryResult.validation_error("注册名不能为空", error_code="INVALID_KEY")
        if key in self._deck_types and not replace:
            return QueryResult.failure_result(
                f"牌组类型 '{key}' 已存在",
                error_code="DECK_TYPE_EXISTS"
            )

        self._deck_types[key] = deck_type
        self.logger.info(f"牌组类型 '{key}' 注册成功 ({deck_type.name})")
        return QueryResult.success_result(True)

    def get_deck_type(self, key: str) -> QueryResult[DeckType]:
        """
        获取牌组类型

        Args:
            key: 注册名 (plain, joker, 或自定义注册名)

        Returns:
            查询结果，包含牌组类型
        """
        deck_type = self._deck_types.get(key)
        if deck_type is None:
            return QueryResult.failure_result(
                f"未找到牌组类型 '{key}'",
                error_code="DECK_TYPE_NOT_FOUND"
            )
        return QueryResult.success_result(deck_type)

    def require_deck_type(self, key: str) -> DeckType:
        """获取牌组类型，未注册时抛出UnknownDeckTypeError"""
        result = self.get_deck_type(key)
        if not result.success:
            raise UnknownDeckTypeError(result.message, error_code=result.error_code)
        return result.data

    def list_deck_types(self) -> List[str]:
        """按注册顺序列出所有牌组类型名"""
        return list(self._deck_types)

    def create_deck(self, key: str, rng: Optional[random.Random] = None) -> QueryResult[Deck]:
        """
        按注册名创建牌组

        Args:
            key: 注册名
            rng: 注入的随机数生成器

        Returns:
            查询结果，包含新建的牌组
        """
        result = self.get_deck_type(key)
        if not result.success:
            return QueryResult.failure_result(result.message, error_code=result.error_code)
        return QueryResult.success_result(Deck(result.data, rng))

    def get_logging_config(self, profile: str = "default") -> QueryResult[LoggingConfig]:
        """
        获取日志配置

        Args:
            profile: 配置名 (default, debug, quiet)

        Returns:
            查询结果，包含日志配置
        """
        if profile not in self._logging_configs:
            self.logger.warning(f"未找到日志配置 '{profile}'，使用默认配置")
            profile = "default"
        return QueryResult.success_result(self._logging_configs[profile])
