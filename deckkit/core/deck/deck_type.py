"""
牌组类型定义.

DeckType把名称、花色集合、点数集合和建牌函数打包在一起，是牌组的扩展点：
调用方可以传入枚举之外的编码，或提供自定义建牌函数（例如追加王牌），
而无需修改Deck本身.
"""

from dataclasses import dataclass, field, replace
from typing import Callable, Iterable, List, Optional, Protocol, Sequence, Tuple

from ..exceptions import DeckConfigError
from .card import Card, JOKER
from .types import Suit, Value, get_standard_suits, get_standard_values


class CardSetBuilder(Protocol):
    """
    建牌函数协议.

    必须是牌组类型的纯函数：构造和每次重置都会调用，不能依赖隐藏状态.
    """

    def __call__(self, deck_type: 'DeckType') -> Sequence[Card]:
        ...


def generate_cards(deck_type: 'DeckType') -> List[Card]:
    """
    按花色为主、点数为次的顺序生成所有组合.

    Args:
        deck_type: 牌组类型

    Returns:
        List[Card]: 花色数 x 点数数 张牌
    """
    return [
        Card(suit, value)
        for suit in deck_type.suits
        for value in deck_type.values
    ]


def build_joker_cards(deck_type: 'DeckType') -> List[Card]:
    """生成标准组合后在末尾追加一张王牌."""
    cards = generate_cards(deck_type)
    cards.append(JOKER)
    return cards


def _as_codes(codes: Iterable[int], forbidden, field_name: str) -> Tuple[int, ...]:
    """把编码集合规范化为元组并校验元素类型."""
    try:
        result = tuple(codes)
    except TypeError:
        raise DeckConfigError(f"{field_name}必须是可迭代的整数编码", error_code="INVALID_CODES") from None
    for code in result:
        if isinstance(code, bool) or not isinstance(code, int) or isinstance(code, forbidden):
            raise DeckConfigError(f"{field_name}包含无效编码: {code!r}", error_code="INVALID_CODES")
    return result


@dataclass(frozen=True)
class DeckType:
    """
    牌组类型配置.

    Attributes:
        name: 显示名称
        suits: 有序的花色编码
        values: 有序的点数编码
        init_func: 建牌函数，以本配置为参数返回牌序列

    Raises:
        DeckConfigError: 名称为空、编码无效或建牌函数不可调用时
    """

    name: str
    suits: Tuple[int, ...] = field(default_factory=lambda: tuple(get_standard_suits()))
    values: Tuple[int, ...] = field(default_factory=lambda: tuple(get_standard_values()))
    init_func: Callable[['DeckType'], Sequence[Card]] = generate_cards

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise DeckConfigError(f"牌组名称必须是非空字符串，实际: {self.name!r}",
                                  error_code="INVALID_NAME")
        if not callable(self.init_func):
            raise DeckConfigError(f"建牌函数必须可调用，实际: {type(self.init_func)}",
                                  error_code="INVALID_INIT_FUNC")
        object.__setattr__(self, 'suits', _as_codes(self.suits, Value, "花色"))
        object.__setattr__(self, 'values', _as_codes(self.values, Suit, "点数"))

    def build(self) -> List[Card]:
        """调用建牌函数，返回新的牌列表."""
        return list(self.init_func(self))

    def with_builder(self, init_func: CardSetBuilder, name: Optional[str] = None) -> 'DeckType':
        """返回花色、点数相同但建牌函数不同的新配置."""
        return replace(self, init_func=init_func, name=name or self.name)


PLAIN_DECK = DeckType(name="Plain", init_func=generate_cards)

JOKER_DECK = DeckType(name="Joker", init_func=build_joker_cards)
