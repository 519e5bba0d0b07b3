"""JSON file persistence for the completion set."""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path
from typing import cast

from .logging_config import get_logger

logger = get_logger(__name__)


class CompletionStore:
    """Reads and writes completed course ids as a JSON array of strings."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def load(self) -> set[str]:
        """Return persisted course ids; an absent file yields an empty set."""
        if not self.path.exists():
            return set()
        raw: object = json.loads(self.path.read_text(encoding="utf-8"))
        if raw is None:
            return set()
        if not isinstance(raw, list):
            raise ValueError(f"Progress file {self.path} must contain a JSON array.")
        completed: set[str] = set()
        for item in cast(list[object], raw):
            if not isinstance(item, str):
                raise ValueError(f"Progress file {self.path} has a non-string entry: {item!r}")
            completed.add(item)
        return completed

    def save(self, completed: Iterable[str]) -> None:
        """Persist course ids as a sorted, duplicate-free array."""
        payload = sorted(set(completed))
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # Write a sibling file first so an interrupted save never truncates the previous state.
        staging = self.path.with_name(self.path.name + ".tmp")
        try:
            staging.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
            staging.replace(self.path)
        except OSError:
            staging.unlink(missing_ok=True)
            raise
        logger.debug("Saved %d completed courses to %s", len(payload), self.path)

    def clear(self) -> None:
        """Remove persisted progress."""
        self.path.unlink(missing_ok=True)
