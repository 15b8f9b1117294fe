# app/services/diary_services.py
import json
import logging
import os
from datetime import datetime
from typing import Any, Dict, Iterable, List, Mapping, Optional

from app.core.config import DATA_DIR, settings
from app.data.local_storage import LocalStorage
from app.data.tarot import tarot_cards
from app.models.diary_models import DiaryCollection, DiaryEntry
from app.models.tarot_models import TarotCard

logger = logging.getLogger(__name__)

DIARY_NAMESPACE = "diary"
DEFAULT_SEED_PATH = os.path.join(DATA_DIR, "diary.json")

# Accepted field names (storage key or attribute name) -> attribute name
UPDATABLE_FIELDS = {
    "date": "date",
    "cardIds": "card_ids",
    "card_ids": "card_ids",
    "question": "question",
    "interpretation": "interpretation",
}


class DiaryStore:
    """
    Ordered collection of diary entries mirrored to local storage.

    Entries are kept in an insertion-ordered dict keyed by id, so lookups and
    deletes are O(1) while iteration keeps the diary order. Every mutation
    rewrites the whole collection under ``namespace`` in ``storage``.

    Callers only ever receive copies; changes go through ``update`` or the
    ``set_*`` helpers so that persistence cannot be bypassed.
    """

    def __init__(
        self,
        storage: LocalStorage,
        namespace: str = DIARY_NAMESPACE,
        seed_path: Optional[str] = DEFAULT_SEED_PATH,
        card_catalogue: Optional[Mapping[int, TarotCard]] = None,
    ):
        self.storage = storage
        self.namespace = namespace
        self.seed_path = seed_path
        self.card_catalogue = card_catalogue
        self._entries: Dict[str, DiaryEntry] = {}
        self._rehydrate()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, entry_id: object) -> bool:
        return entry_id in self._entries

    # Persistence

    def _rehydrate(self) -> None:
        stored = self.storage.get_item(self.namespace)
        if stored is not None:
            try:
                self._load(self._parse(stored).entries)
                logger.info(f"Rehydrated {len(self._entries)} diary entries from local storage")
                return
            except ValueError as e:
                logger.warning(f"Malformed diary in local storage, falling back to seed data: {e}")
        else:
            logger.info("No diary found in local storage, using seed data")

        self._load(self._read_seed().entries)
        self._persist()

    def _parse(self, stored: Any) -> DiaryCollection:
        collection = DiaryCollection.model_validate(stored)
        ids = [entry.id for entry in collection.entries]
        if len(ids) != len(set(ids)):
            raise ValueError("duplicate diary entry ids")
        return collection

    def _read_seed(self) -> DiaryCollection:
        if self.seed_path is None:
            return DiaryCollection()
        try:
            with open(self.seed_path, "r", encoding="utf-8") as f:
                return self._parse(json.load(f))
        except (OSError, ValueError) as e:
            logger.error(f"Could not read diary seed data at {self.seed_path}, starting empty: {e}")
            return DiaryCollection()

    def _load(self, entries: Iterable[DiaryEntry]) -> None:
        self._entries = {entry.id: entry for entry in entries}

    def _persist(self, entries: Optional[Dict[str, DiaryEntry]] = None) -> None:
        if entries is None:
            entries = self._entries
        self.storage.set_item(
            self.namespace,
            {"entries": [entry.to_storage() for entry in entries.values()]},
        )

    def _commit(self, entries: Dict[str, DiaryEntry]) -> None:
        # Write first; memory only changes once storage holds the new state
        self._persist(entries)
        self._entries = entries

    def _check_card_ids(self, card_ids: Iterable[int]) -> None:
        if self.card_catalogue is None:
            return
        unknown = [card_id for card_id in card_ids if card_id not in self.card_catalogue]
        if unknown:
            raise ValueError(f"Unknown card ids: {unknown}")

    # Queries

    def entries(self) -> List[DiaryEntry]:
        return [entry.model_copy(deep=True) for entry in self._entries.values()]

    def get(self, entry_id: str) -> Optional[DiaryEntry]:
        entry = self._entries.get(entry_id)
        if entry is None:
            return None
        return entry.model_copy(deep=True)

    def cards_for(self, entry_id: str) -> Optional[List[TarotCard]]:
        """Resolve an entry's card ids against the catalogue, skipping unknown ids."""
        entry = self._entries.get(entry_id)
        if entry is None:
            return None
        catalogue = self.card_catalogue or {}
        return [catalogue[card_id] for card_id in entry.card_ids if card_id in catalogue]

    # Mutations

    def add(self) -> DiaryEntry:
        entry = DiaryEntry()
        while entry.id in self._entries:
            entry = DiaryEntry()
        self._commit({**self._entries, entry.id: entry})
        logger.debug(f"Added diary entry {entry.id}")
        return entry.model_copy(deep=True)

    def update(self, entry_id: str, fields: Mapping[str, Any]) -> Optional[DiaryEntry]:
        entry = self._entries.get(entry_id)
        if entry is None:
            return None

        changes = {}
        for name, value in fields.items():
            if name == "id":
                raise ValueError("Diary entry id cannot be changed")
            attribute = UPDATABLE_FIELDS.get(name)
            if attribute is None:
                raise ValueError(f"Unknown diary entry field: {name}")
            changes[attribute] = value

        updated = DiaryEntry.model_validate({**entry.model_dump(), **changes})
        if "card_ids" in changes:
            self._check_card_ids(updated.card_ids)

        self._commit({**self._entries, entry_id: updated})
        return updated.model_copy(deep=True)

    def set_date(self, entry_id: str, date: datetime) -> Optional[DiaryEntry]:
        return self.update(entry_id, {"date": date})

    def set_question(self, entry_id: str, question: str) -> Optional[DiaryEntry]:
        return self.update(entry_id, {"question": question})

    def set_interpretation(self, entry_id: str, interpretation: str) -> Optional[DiaryEntry]:
        return self.update(entry_id, {"interpretation": interpretation})

    def set_card_ids(self, entry_id: str, card_ids: List[int]) -> Optional[DiaryEntry]:
        return self.update(entry_id, {"card_ids": card_ids})

    def delete(self, entry_id: str) -> bool:
        if entry_id not in self._entries:
            return False
        self._commit({key: entry for key, entry in self._entries.items() if key != entry_id})
        logger.debug(f"Deleted diary entry {entry_id}")
        return True


def create_diary_store(storage_path: Optional[str] = None) -> DiaryStore:
    """
    Build the diary store backed by DIARY_STORAGE_PATH, validating card ids
    against the loaded tarot deck when one has been loaded.
    """
    storage = LocalStorage(storage_path or settings.DIARY_STORAGE_PATH)
    return DiaryStore(storage, card_catalogue=tarot_cards or None)
