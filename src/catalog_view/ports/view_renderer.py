from __future__ import annotations

from abc import ABC, abstractmethod

from catalog_view.domain.view import ViewSnapshot


class ViewRenderer(ABC):
    """
    Port for presenting the current view.

    Called by the view engine after each state change. Renderers consume
    the snapshot and must never call back into the engine.
    """

    @abstractmethod
    def render(self, snapshot: ViewSnapshot) -> None: ...
