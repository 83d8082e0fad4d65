"""Keyed card board: patches card nodes in place and dispatches clicks.

Nodes are looked up by city identifier only. A click starts at the
clicked node and bubbles to its parent card unless the node stops
propagation, which the forecast button always does.
"""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field, fields
from typing import Any

from weatherboard.render.cards import CardView

logger = logging.getLogger(__name__)

Handler = Callable[[str], Any]

CARD = "card"
FORECAST_BUTTON = "forecast"


@dataclass
class Node:
    role: str
    on_click: Handler | None = None
    stop_propagation: bool = False
    parent: "Node | None" = None


@dataclass
class CardNode(Node):
    city: str = ""
    text: dict[str, Any] = field(default_factory=dict)
    forecast_button: Node | None = None


class CardBoard:
    def __init__(self, on_primary: Handler, on_secondary: Handler):
        self._on_primary = on_primary
        self._on_secondary = on_secondary
        self._cards: dict[str, CardNode] = {}

    def render(self, views: Iterable[CardView]) -> list[str]:
        """Bring the board in line with ``views``.

        Returns the cities whose nodes were created or changed; an
        unchanged store renders to an empty list.
        """
        changed: list[str] = []
        ordered: dict[str, CardNode] = {}
        for view in views:
            node = self._cards.get(view.city)
            if node is None:
                node = self._create(view.city)
                changed.append(view.city)
            if self._patch(node, view) and view.city not in changed:
                changed.append(view.city)
            ordered[view.city] = node

        for stale in self._cards.keys() - ordered.keys():
            logger.debug("Removing card for %s", stale)
            changed.append(stale)
        self._cards = ordered
        return changed

    def _create(self, city: str) -> CardNode:
        card = CardNode(role=CARD, on_click=self._on_primary, city=city)
        card.forecast_button = Node(
            role=FORECAST_BUTTON,
            on_click=self._on_secondary,
            stop_propagation=True,
            parent=card,
        )
        return card

    @staticmethod
    def _patch(node: CardNode, view: CardView) -> bool:
        dirty = False
        for f in fields(view):
            value = getattr(view, f.name)
            if node.text.get(f.name) != value:
                node.text[f.name] = value
                dirty = True
        return dirty

    def click(self, city: str, target: str = CARD) -> list[Any]:
        """Dispatch a click on a card or its forecast button.

        Returns the handler results in firing order. Handlers may return
        awaitables; awaiting them is up to the caller.
        """
        card = self._cards.get(city)
        if card is None:
            raise KeyError(f"No card for {city}")
        if target == CARD:
            node: Node | None = card
        elif target == FORECAST_BUTTON:
            node = card.forecast_button
        else:
            raise ValueError(f"Unknown click target: {target}")

        results = []
        while node is not None:
            if node.on_click is not None:
                results.append(node.on_click(city))
            if node.stop_propagation:
                break
            node = node.parent
        return results

    def card(self, city: str) -> CardNode | None:
        return self._cards.get(city)

    def cities(self) -> list[str]:
        return list(self._cards)

    def __len__(self) -> int:
        return len(self._cards)
