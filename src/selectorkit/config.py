from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class JsonConfig:
    indent: int | None = None
    sort_keys: bool = False
    compact: bool = True  # no spaces after "," and ":"
    ensure_ascii: bool = True

    @property
    def separators(self) -> tuple[str, str] | None:
        if self.compact:
            return (",", ":")
        return None
