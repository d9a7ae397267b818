"""
扑克牌组管理模块.

提供Card、DeckType和Deck，实现牌面渲染、可配置建牌、洗牌和发牌.
"""

from .types import Suit, Value, get_standard_suits, get_standard_values
from .card import Card, ZERO_CARD, JOKER
from .deck_type import (
    CardSetBuilder, DeckType, PLAIN_DECK, JOKER_DECK,
    generate_cards, build_joker_cards,
)
from .deck import Deck, DeckState, default_rng

__all__ = [
    'Suit', 'Value', 'get_standard_suits', 'get_standard_values',
    'Card', 'ZERO_CARD', 'JOKER',
    'CardSetBuilder', 'DeckType', 'PLAIN_DECK', 'JOKER_DECK',
    'generate_cards', 'build_joker_cards',
    'Deck', 'DeckState', 'default_rng',
]
