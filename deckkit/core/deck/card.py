"""
扑克牌数据结构.

定义不可变的Card类。渲染是全函数：无法识别的花色或点数各自独立地
显示为"?"，永远不会抛出异常.
"""

from dataclasses import dataclass
from typing import Dict, Union

from .types import Suit, Value, SUIT_DISPLAY, VALUE_DISPLAY, UNKNOWN_DISPLAY

SuitCode = Union[Suit, int]
ValueCode = Union[Value, int]


def _normalize(code: int, enum_cls, field_name: str):
    """把已知的整数编码转换为枚举成员，未知编码保留为原始整数."""
    if isinstance(code, bool) or not isinstance(code, int):
        raise TypeError(f"{field_name}必须是整数编码，实际: {type(code)}")
    try:
        return enum_cls(code)
    except ValueError:
        return int(code)


@dataclass(frozen=True)
class Card:
    """
    表示一张扑克牌.

    不可变数据类，由花色和点数唯一确定，按(suit, value)结构相等.
    不带参数构造得到零值牌，只在空牌组发牌失败时作为占位返回.

    Attributes:
        suit: 花色，Suit成员或枚举之外的整数编码
        value: 点数，Value成员或枚举之外的整数编码

    Examples:
        >>> str(Card(Suit.SPADE, Value.ACE))
        'SA'
        >>> str(Card(99, Value.ACE))
        '?A'
    """

    suit: SuitCode = Suit.UNKNOWN
    value: ValueCode = Value.NONE

    def __post_init__(self) -> None:
        """
        校验并规范化花色和点数.

        Raises:
            TypeError: 编码不是整数，或把花色和点数放错了位置
        """
        if isinstance(self.suit, Value):
            raise TypeError(f"花色位置不能传入点数: {self.suit!r}")
        if isinstance(self.value, Suit):
            raise TypeError(f"点数位置不能传入花色: {self.value!r}")
        object.__setattr__(self, 'suit', _normalize(self.suit, Suit, "花色"))
        object.__setattr__(self, 'value', _normalize(self.value, Value, "点数"))

    def render(self) -> str:
        """
        返回花色字符加点数字符组成的短字符串.

        Returns:
            str: 如"SA"、"H10"、"J"；未知字段替换为"?"
        """
        suit_str = SUIT_DISPLAY.get(self.suit, UNKNOWN_DISPLAY)
        value_str = VALUE_DISPLAY.get(self.value, UNKNOWN_DISPLAY)
        return suit_str + value_str

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        suit = self.suit.name if isinstance(self.suit, Suit) else self.suit
        value = self.value.name if isinstance(self.value, Value) else self.value
        return f"Card({suit}, {value})"

    @property
    def is_zero(self) -> bool:
        """是否为零值牌"""
        return self.suit == Suit.UNKNOWN and self.value == Value.NONE

    @property
    def is_joker(self) -> bool:
        """是否为王牌"""
        return self.suit == Suit.JOKER

    @property
    def is_known(self) -> bool:
        """花色和点数是否都在枚举范围内（UNKNOWN花色不算）"""
        return (isinstance(self.suit, Suit) and self.suit is not Suit.UNKNOWN
                and isinstance(self.value, Value))

    @classmethod
    def from_str(cls, card_str: str) -> 'Card':
        """
        从渲染字符串解析扑克牌.

        Args:
            card_str: 格式为"花色点数"的字符串，如"SA"、"d10"、"J"

        Returns:
            Card: 对应的扑克牌对象

        Raises:
            TypeError: 输入不是字符串
            ValueError: 花色或点数无法识别
        """
        if not isinstance(card_str, str):
            raise TypeError(f"输入必须是字符串，实际: {type(card_str)}")
        text = card_str.strip().upper()
        if not text:
            raise ValueError(f"卡牌字符串格式错误: {card_str!r}")

        suit_map: Dict[str, Suit] = {code: suit for suit, code in SUIT_DISPLAY.items()}
        value_map: Dict[str, Value] = {code: value for value, code in VALUE_DISPLAY.items()}
        value_map["T"] = Value.TEN

        suit_str, value_str = text[0], text[1:]
        if suit_str not in suit_map:
            raise ValueError(f"无效的花色: {suit_str}")
        if value_str not in value_map:
            raise ValueError(f"无效的点数: {value_str}")
        return cls(suit_map[suit_str], value_map[value_str])


ZERO_CARD = Card()
JOKER = Card(Suit.JOKER, Value.NONE)
