"""
deckkit Test Configuration - pytest配置文件

提供通用fixture和测试标记定义。
"""

import random

import pytest

from deckkit.core.deck import Card, Deck, DeckType, Suit, Value, generate_cards


PLAIN_CARDS = (
    "SA S2 S3 S4 S5 S6 S7 S8 S9 S10 SJ SQ SK "
    "HA H2 H3 H4 H5 H6 H7 H8 H9 H10 HJ HQ HK "
    "DA D2 D3 D4 D5 D6 D7 D8 D9 D10 DJ DQ DK "
    "CA C2 C3 C4 C5 C6 C7 C8 C9 C10 CJ CQ CK"
)
JOKER_CARDS = PLAIN_CARDS + " J"


def render_all(cards) -> str:
    """把牌序列渲染成空格分隔的字符串"""
    return " ".join(card.render() for card in cards)


@pytest.fixture
def seeded_rng():
    """固定种子的随机数生成器fixture"""
    return random.Random(42)


@pytest.fixture
def plain_deck(seeded_rng):
    """使用固定种子的标准牌组fixture"""
    return Deck(rng=seeded_rng)


@pytest.fixture
def inline_joker_type():
    """在测试内定义的53张牌组类型fixture"""
    def build(deck_type):
        cards = list(generate_cards(deck_type))
        cards.append(Card(Suit.JOKER, Value.NONE))
        return cards

    return DeckType(name="Joker", init_func=build)


def pytest_configure(config):
    """pytest配置"""
    config.addinivalue_line(
        "markers", "property_test: 标记基于属性的测试"
    )
    config.addinivalue_line(
        "markers", "integration: 标记集成测试"
    )
