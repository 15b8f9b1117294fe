# app/data/local_storage.py
import json
import logging
import os
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class LocalStorage:
    """
    Namespaced key/value storage persisted as a single JSON document on disk.

    Values must be JSON serializable. Each write replaces the whole file via a
    temporary file so an interrupted write never leaves a half-written store.
    """

    def __init__(self, path: str):
        self.path = path

    def _read_all(self) -> Dict[str, Any]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Could not read local storage at {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring local storage at {self.path}: expected a JSON object")
            return {}
        return data

    def _write_all(self, data: Dict[str, Any]) -> None:
        directory = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(directory, exist_ok=True)
        tmp_path = f"{self.path}.tmp"
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
        os.replace(tmp_path, self.path)

    def get_item(self, key: str) -> Optional[Any]:
        return self._read_all().get(key)

    def set_item(self, key: str, value: Any) -> None:
        data = self._read_all()
        data[key] = value
        self._write_all(data)

    def remove_item(self, key: str) -> None:
        data = self._read_all()
        if key in data:
            del data[key]
            self._write_all(data)
