import json
import logging
from typing import Dict, Optional

from app.models.tarot_models import TarotCard

logger = logging.getLogger(__name__)

tarot_cards: Dict[int, TarotCard] = {}

def load_tarot_data(filepath) -> Dict[int, TarotCard]:
    """
    Load the tarot deck from a JSON file into the card registry, keyed by card id.
    """
    with open(filepath, "r", encoding="utf-8") as f:
        data = json.load(f)

    cards = {}
    for card in data["cards"]:
        cards[card["id"]] = TarotCard(
            id=card["id"],
            name=card["name"],
            number=card["number"],
            arcana=card["arcana"],
            suit=card.get("suit"),
        )

    tarot_cards.clear()
    tarot_cards.update(cards)
    logger.info(f"Loaded {len(tarot_cards)} tarot cards from {filepath}")
    return tarot_cards

def get_card(card_id: int) -> Optional[TarotCard]:
    return tarot_cards.get(card_id)
