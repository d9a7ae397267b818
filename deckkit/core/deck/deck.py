"""
扑克牌组容器.

定义Deck类，持有一个DeckType和一段可变的牌序列，提供重置、洗牌、
发牌和查看操作. Deck内部不加锁，并发访问由调用方自行同步.
"""

import logging
import random
import time
from enum import Enum
from typing import Iterator, List, Optional, Tuple

from .card import Card, ZERO_CARD
from .deck_type import DeckType, PLAIN_DECK

logger = logging.getLogger(__name__)

# 进程级随机数生成器，导入时用时间种子初始化一次
_DEFAULT_RNG = random.Random(time.time_ns())


def default_rng() -> random.Random:
    """返回进程级默认随机数生成器."""
    return _DEFAULT_RNG


class DeckState(Enum):
    """牌组状态"""
    EMPTY = "empty"
    POPULATED = "populated"


class Deck:
    """
    表示一副可变的扑克牌.

    牌序列的顺序就是发牌顺序：发牌总是从最前面取，洗牌在原地打乱.
    牌组发空后不会失效，调用reset()即可重新使用.

    Attributes:
        _deck_type: 牌组类型配置
        _cards: 当前牌序列
        _rng: 注入的随机数生成器，None时使用进程级默认生成器

    Examples:
        >>> deck = Deck()
        >>> card, ok = deck.deal()
        >>> str(card), ok, len(deck)
        ('SA', True, 51)
    """

    def __init__(self, deck_type: DeckType = PLAIN_DECK,
                 rng: Optional[random.Random] = None) -> None:
        """
        创建牌组并立即调用建牌函数填充.

        Args:
            deck_type: 牌组类型，默认为52张标准牌
            rng: 随机数生成器，用于确定性测试
        """
        self._deck_type = deck_type
        self._rng = rng
        self._cards: List[Card] = []
        self.reset()

    @classmethod
    def new(cls, rng: Optional[random.Random] = None) -> 'Deck':
        """创建未洗牌的52张标准牌组."""
        return cls(PLAIN_DECK, rng)

    def reset(self) -> None:
        """按牌组类型重新生成全部牌，丢弃当前（包括发了一半的）牌序列."""
        self._cards = self._deck_type.build()
        logger.debug(f"Deck '{self.name}' reset with {len(self._cards)} cards")

    @property
    def cards(self) -> Tuple[Card, ...]:
        """
        当前牌序列的快照.

        Returns:
            Tuple[Card, ...]: 按发牌顺序排列的不可变副本
        """
        return tuple(self._cards)

    def shuffle(self, rng: Optional[random.Random] = None) -> None:
        """
        原地洗牌.

        对每个位置i，从整个区间[0, len)中随机取r并交换i和r. 抽取区间是全长
        而不是[i, len)，与历史行为保持一致. 空牌组时不做任何事.

        Args:
            rng: 本次使用的随机数生成器，优先于构造时注入的生成器
        """
        generator = rng or self._rng or _DEFAULT_RNG
        cards = self._cards
        length = len(cards)
        for i in range(length):
            r = generator.randrange(length)
            cards[i], cards[r] = cards[r], cards[i]
        logger.debug(f"Deck '{self.name}' shuffled ({length} cards)")

    def deal(self) -> Tuple[Card, bool]:
        """
        发出最前面的一张牌.

        Returns:
            Tuple[Card, bool]: (牌, 是否成功)；牌组为空时返回(ZERO_CARD, False)
        """
        if not self._cards:
            logger.debug(f"Deck '{self.name}' is empty, nothing to deal")
            return ZERO_CARD, False
        return self._cards.pop(0), True

    def deal_cards(self, count: int) -> List[Card]:
        """
        从前往后发出最多count张牌.

        Args:
            count: 要发的牌数

        Returns:
            List[Card]: 发出的牌，牌组不足时少于count张

        Raises:
            ValueError: 当count为负数时
        """
        if count < 0:
            raise ValueError("Count must be non-negative")
        dealt = self._cards[:count]
        del self._cards[:count]
        return dealt

    def peek(self) -> Tuple[Card, bool]:
        """查看最前面的牌但不发出，空牌组返回(ZERO_CARD, False)."""
        if not self._cards:
            return ZERO_CARD, False
        return self._cards[0], True

    @property
    def state(self) -> DeckState:
        """当前状态"""
        return DeckState.POPULATED if self._cards else DeckState.EMPTY

    @property
    def is_empty(self) -> bool:
        return not self._cards

    @property
    def cards_remaining(self) -> int:
        return len(self._cards)

    @property
    def deck_type(self) -> DeckType:
        return self._deck_type

    @property
    def name(self) -> str:
        return self._deck_type.name

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        return " ".join(card.render() for card in self._cards)

    def __repr__(self) -> str:
        return f"Deck(name={self.name!r}, cards_remaining={len(self._cards)})"
