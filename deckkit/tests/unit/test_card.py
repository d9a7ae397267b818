"""
Card类和花色、点数枚举的单元测试.
"""

import pytest

from deckkit.core.deck import Card, Suit, Value, ZERO_CARD, JOKER
from deckkit.core.deck.types import get_standard_suits, get_standard_values


class TestEnums:
    """花色和点数枚举的单元测试."""

    def test_value_ordinals(self):
        """A到K映射为1-13."""
        assert Value.ACE == 1
        assert Value.KING == 13
        assert [int(v) for v in get_standard_values()] == list(range(1, 14))

    def test_standard_suit_order(self):
        assert get_standard_suits() == [Suit.SPADE, Suit.HEART, Suit.DIAMOND, Suit.CLUB]


class TestCard:
    """Card类的单元测试."""

    def test_card_creation(self):
        card = Card(Suit.HEART, Value.ACE)

        assert card.suit is Suit.HEART
        assert card.value is Value.ACE

    def test_int_codes_are_normalized(self):
        """已知的整数编码转换为枚举成员."""
        card = Card(1, 13)

        assert card.suit is Suit.SPADE
        assert card.value is Value.KING
        assert card == Card(Suit.SPADE, Value.KING)

    def test_card_immutability(self):
        card = Card(Suit.SPADE, Value.KING)

        with pytest.raises(AttributeError):
            card.suit = Suit.HEART
        with pytest.raises(AttributeError):
            card.value = Value.ACE

    def test_card_string_representation(self):
        test_cases = [
            (Card(Suit.SPADE, Value.ACE), "SA"),
            (Card(Suit.HEART, Value.TEN), "H10"),
            (Card(Suit.DIAMOND, Value.QUEEN), "DQ"),
            (Card(Suit.CLUB, Value.TWO), "C2"),
            (JOKER, "J"),
        ]

        for card, expected in test_cases:
            assert card.render() == expected
            assert str(card) == expected

    def test_unknown_fields_render_independently(self):
        """未知花色和未知点数各自显示为"?"."""
        assert Card(99, Value.ACE).render() == "?A"
        assert Card(Suit.SPADE, 99).render() == "S?"
        assert Card(99, 99).render() == "??"

    def test_unknown_suit_sentinel_renders_placeholder(self):
        assert Card(Suit.UNKNOWN, Value.ACE).render() == "?A"
        assert ZERO_CARD.render() == "?"

    def test_out_of_range_codes_are_kept(self):
        card = Card(99, -1)

        assert card.suit == 99
        assert card.value == -1
        assert not card.is_known
        assert repr(card) == "Card(99, -1)"

    def test_equality_and_hash(self):
        card1 = Card(Suit.HEART, Value.ACE)
        card2 = Card(Suit.HEART, Value.ACE)
        card3 = Card(Suit.SPADE, Value.ACE)

        assert card1 == card2
        assert hash(card1) == hash(card2)
        assert card1 != card3
        assert len({card1, card2, card3}) == 2

    def test_cross_domain_codes_rejected(self):
        """花色和点数不能互换位置."""
        with pytest.raises(TypeError):
            Card(Value.ACE, Value.ACE)
        with pytest.raises(TypeError):
            Card(Suit.SPADE, Suit.HEART)

    def test_non_integer_codes_rejected(self):
        with pytest.raises(TypeError):
            Card("S", Value.ACE)
        with pytest.raises(TypeError):
            Card(Suit.SPADE, 1.0)
        with pytest.raises(TypeError):
            Card(True, Value.ACE)

    def test_zero_card(self):
        assert Card() == ZERO_CARD
        assert ZERO_CARD.is_zero
        assert not ZERO_CARD.is_known
        assert not Card(Suit.SPADE, Value.ACE).is_zero

    def test_joker_flags(self):
        assert JOKER.is_joker
        assert JOKER.is_known
        assert not Card(Suit.SPADE, Value.ACE).is_joker

    def test_repr(self):
        assert repr(Card(Suit.HEART, Value.ACE)) == "Card(HEART, ACE)"

    def test_card_from_string(self):
        test_cases = [
            ("SA", Card(Suit.SPADE, Value.ACE)),
            ("h10", Card(Suit.HEART, Value.TEN)),
            ("DT", Card(Suit.DIAMOND, Value.TEN)),
            ("ck", Card(Suit.CLUB, Value.KING)),
            ("J", JOKER),
        ]

        for card_str, expected in test_cases:
            assert Card.from_str(card_str) == expected

    def test_card_from_string_invalid(self):
        invalid_strings = ["", "X2", "S11", "S?", "??", "A"]

        for invalid_str in invalid_strings:
            with pytest.raises(ValueError):
                Card.from_str(invalid_str)

        with pytest.raises(TypeError):
            Card.from_str(None)
