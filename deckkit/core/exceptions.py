"""
牌组异常定义

核心操作（发牌、洗牌、渲染）不抛异常，只有配置错误才使用这里的异常类型。
"""

from typing import Optional


class DeckError(Exception):
    """牌组基础异常类"""

    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code


class DeckConfigError(DeckError):
    """牌组类型配置错误异常"""
    pass


class UnknownDeckTypeError(DeckError):
    """未注册的牌组类型异常"""
    pass
