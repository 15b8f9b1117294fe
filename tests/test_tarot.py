"""Tests for the tarot card catalogue."""

from app.data.tarot import get_card, tarot_cards


class TestCardCatalogue:
    def test_full_deck(self, card_catalogue):
        assert len(card_catalogue) == 78
        assert sorted(card_catalogue) == list(range(78))
        assert sum(1 for card in card_catalogue.values() if card.arcana == "major") == 22

    def test_major_arcana_have_no_suit(self, card_catalogue):
        assert card_catalogue[0].name == "The Fool"
        assert card_catalogue[0].suit is None

    def test_minor_arcana(self, card_catalogue):
        assert card_catalogue[37].name == "Two of Cups"
        assert card_catalogue[37].suit == "cups"
        assert card_catalogue[37].number == 2

    def test_registry_lookup(self, card_catalogue):
        assert tarot_cards[72].name == "Nine of Pentacles"
        assert get_card(24).name == "Three of Wands"
        assert get_card(999) is None
