"""Key extraction: collect registry snapshots and dump the keys in use."""

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

_log = logging.getLogger(__name__)


class KeyCollector:
    """Registry observer that remembers every key a render registered.

    Pass an instance as ``watch_register`` to a ``LocaleProvider``.
    """

    def __init__(self):
        self.seen: dict[str, Any] = {}
        self.current: dict[str, Any] = {}

    def __call__(self, snapshot: Mapping[str, Any]) -> None:
        self.current = dict(snapshot)
        self.seen.update(snapshot)

    def missing_from(self, translations: Mapping[str, str]) -> list[str]:
        """Keys registered at some point but absent from ``translations``."""
        return sorted(k for k in self.seen if k not in translations)

    def write(self, path: str | Path) -> Path:
        out = Path(path)
        out.parent.mkdir(parents=True, exist_ok=True)
        with open(out, "w", encoding="utf-8") as f:
            json.dump(self.seen, f, ensure_ascii=False, indent=2, sort_keys=True)
            f.write("\n")
        _log.info("Wrote %d translation keys to %s", len(self.seen), out)
        return out
