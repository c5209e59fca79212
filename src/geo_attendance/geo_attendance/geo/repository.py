from __future__ import annotations

from typing import Optional, Protocol

from .model import AreaConfig


class AreaConfigRepository(Protocol):
    def load(self) -> Optional[AreaConfig]:
        """The stored work area, or None when the store has none."""

        raise NotImplementedError
