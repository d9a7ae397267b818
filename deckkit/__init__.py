"""
deckkit - 扑克牌组基础组件

提供可配置的扑克牌、牌组类型以及洗牌、发牌等基础操作。

Modules:
    core.deck: 牌面定义和牌组容器
    core.exceptions: 配置相关异常
    application: 牌组类型注册与日志配置服务
"""

from .core.deck import (
    Card, Deck, DeckState, DeckType, Suit, Value,
    PLAIN_DECK, JOKER_DECK, ZERO_CARD, generate_cards, build_joker_cards,
)

__version__ = "1.0.0"

__all__ = [
    'Card', 'Deck', 'DeckState', 'DeckType', 'Suit', 'Value',
    'PLAIN_DECK', 'JOKER_DECK', 'ZERO_CARD',
    'generate_cards', 'build_joker_cards',
]
