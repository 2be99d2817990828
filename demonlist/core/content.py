from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Optional

from demonlist.core.levels import Editor, Failed, Loaded, Slot, editor_from_dict, level_from_dict

logger = logging.getLogger(__name__)

LIST_FILE = "_list.json"
EDITORS_FILE = "_editors.json"


class ContentRepository:
    """Reads the ranked list and the editor roster from a content directory.

    Layout: ``_list.json`` holds the level file stems in rank order, each
    level lives in ``<stem>.json`` and the roster in ``_editors.json``.
    Failures come back as ``None`` or ``Failed`` slots, never as exceptions.
    """

    def __init__(self, data_dir: Path) -> None:
        self._data_dir = Path(data_dir)

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    def fetch_list(self) -> Optional[List[Slot]]:
        try:
            stems = self._read_json(self._data_dir / LIST_FILE)
        except (OSError, ValueError) as e:
            logger.error("Failed to load list from %s: %s", self._data_dir, e)
            return None
        if not isinstance(stems, list):
            logger.error("Failed to load list: %s is not a JSON array", LIST_FILE)
            return None

        slots: List[Slot] = []
        for rank, stem in enumerate(stems, start=1):
            stem = str(stem)
            try:
                raw = self._read_json(self._data_dir / f"{stem}.json")
                slots.append(Loaded(level_from_dict(raw, path=stem)))
            except (OSError, KeyError, TypeError, ValueError) as e:
                logger.warning("Failed to load level #%d %s: %s", rank, stem, e)
                slots.append(Failed(stem))
        logger.info("Loaded %d list entries from %s", len(slots), self._data_dir)
        return slots

    def fetch_editors(self) -> Optional[List[Editor]]:
        try:
            raw = self._read_json(self._data_dir / EDITORS_FILE)
            if not isinstance(raw, list):
                raise TypeError(f"{EDITORS_FILE} is not a JSON array")
            return [editor_from_dict(entry) for entry in raw]
        except (OSError, KeyError, TypeError, ValueError) as e:
            logger.warning("Failed to load list editors: %s", e)
            return None

    @staticmethod
    def _read_json(path: Path) -> Any:
        return json.loads(path.read_text(encoding="utf-8"))
