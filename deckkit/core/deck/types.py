"""
扑克牌相关类型定义.

定义花色和点数两个相互独立的枚举，以及它们的单字符显示表.
花色和点数不共享数值空间，避免把花色误当作点数传入.
"""

from enum import IntEnum
from typing import Dict, List


class Suit(IntEnum):
    """
    扑克牌花色枚举.

    UNKNOWN 是零值哨兵，没有显示字符，渲染为"?".
    """

    UNKNOWN = 0
    SPADE = 1
    HEART = 2
    DIAMOND = 3
    CLUB = 4
    JOKER = 5


class Value(IntEnum):
    """
    扑克牌点数枚举.

    A到K映射为1-13，NONE用于王牌等没有点数的牌.
    """

    NONE = 0
    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13


SUIT_DISPLAY: Dict[Suit, str] = {
    Suit.SPADE: "S", Suit.HEART: "H", Suit.DIAMOND: "D",
    Suit.CLUB: "C", Suit.JOKER: "J",
}

VALUE_DISPLAY: Dict[Value, str] = {
    Value.NONE: "",
    Value.ACE: "A", Value.TWO: "2", Value.THREE: "3", Value.FOUR: "4",
    Value.FIVE: "5", Value.SIX: "6", Value.SEVEN: "7", Value.EIGHT: "8",
    Value.NINE: "9", Value.TEN: "10", Value.JACK: "J", Value.QUEEN: "Q",
    Value.KING: "K",
}

UNKNOWN_DISPLAY = "?"


def get_standard_suits() -> List[Suit]:
    """
    获取标准牌组的四种花色.

    Returns:
        List[Suit]: 按黑桃、红桃、方块、梅花排列的花色列表
    """
    return [Suit.SPADE, Suit.HEART, Suit.DIAMOND, Suit.CLUB]


def get_standard_values() -> List[Value]:
    """
    获取标准牌组的13种点数.

    Returns:
        List[Value]: 从A到K升序排列的点数列表
    """
    return [value for value in Value if value is not Value.NONE]
