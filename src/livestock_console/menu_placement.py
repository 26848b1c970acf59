"""Floating action-menu placement.

A contextual menu opens below its trigger unless that would push it past the
bottom edge of the nearest clipping container, in which case it flips above.
The containment hierarchy is abstract: anything with a ``parent``, an
``overflow`` mode and a ``bounding_rect()`` in viewport coordinates works,
so a retained-mode GUI toolkit can plug its widgets in directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Protocol, TypeVar

T = TypeVar("T")

VISIBLE_OVERFLOW = {"visible", ""}
ESCAPE_KEYS = {"Escape", "Esc"}


@dataclass(frozen=True)
class Rect:
    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def contains(self, x: float, y: float) -> bool:
        return self.left <= x <= self.right and self.top <= y <= self.bottom


class LayoutNode(Protocol):
    @property
    def parent(self) -> Optional["LayoutNode"]: ...

    @property
    def overflow(self) -> str: ...

    def bounding_rect(self) -> Rect: ...


@dataclass
class Box:
    """Plain layout node; also what tests and headless callers use."""

    rect: Rect
    overflow: str = "visible"
    parent: Optional["Box"] = None

    def bounding_rect(self) -> Rect:
        return self.rect


class Placement(str, Enum):
    BELOW = "below"
    ABOVE = "above"


def find_clipping_frame(node: LayoutNode) -> LayoutNode | None:
    current = node.parent
    while current is not None:
        if (current.overflow or "").lower() not in VISIBLE_OVERFLOW:
            return current
        current = current.parent
    return None


def resolve_placement(trigger: Rect, menu_height: float, frame: Rect, gap: float = 0.0) -> Placement:
    if trigger.bottom + gap + menu_height > frame.bottom:
        return Placement.ABOVE
    return Placement.BELOW


class MenuPlacementResolver:
    """Open/close lifecycle and below/above state for one action menu."""

    def __init__(
        self,
        trigger: LayoutNode,
        viewport: Rect,
        *,
        menu_height: float = 120.0,
        menu_width: float = 180.0,
        gap: float = 0.0,
        edge_margin: float = 8.0,
    ) -> None:
        self.trigger = trigger
        self.viewport = viewport
        self.menu_height = menu_height
        self.menu_width = menu_width
        self.gap = gap
        self.edge_margin = edge_margin
        self.placement = Placement.BELOW
        self.is_open = False

    def open(self) -> Placement:
        self.is_open = True
        return self.evaluate()

    def close(self) -> None:
        self.is_open = False
        self.placement = Placement.BELOW

    def evaluate(self) -> Placement:
        frame = find_clipping_frame(self.trigger)
        frame_rect = frame.bounding_rect() if frame is not None else self.viewport
        self.placement = resolve_placement(self.trigger.bounding_rect(), self.menu_height, frame_rect, self.gap)
        return self.placement

    def on_scroll(self) -> Placement | None:
        if not self.is_open:
            return None
        return self.evaluate()

    def on_resize(self, viewport: Rect) -> Placement | None:
        self.viewport = viewport
        if not self.is_open:
            return None
        return self.evaluate()

    def menu_rect(self) -> Rect:
        trigger = self.trigger.bounding_rect()
        left = trigger.right - self.menu_width
        if left < self.edge_margin:
            left = trigger.right + self.edge_margin
        if self.placement is Placement.ABOVE:
            top = trigger.top - self.gap - self.menu_height
        else:
            top = trigger.bottom + self.gap
        return Rect(left=left, top=top, width=self.menu_width, height=self.menu_height)

    def on_pointer_down(self, x: float, y: float) -> bool:
        """Close when the press lands outside both trigger and menu. Returns True if closed."""
        if not self.is_open:
            return False
        if self.trigger.bounding_rect().contains(x, y) or self.menu_rect().contains(x, y):
            return False
        self.close()
        return True

    def on_key(self, key: str) -> bool:
        if self.is_open and key in ESCAPE_KEYS:
            self.close()
            return True
        return False

    def select(self, action: Callable[[], T]) -> T:
        try:
            return action()
        finally:
            self.close()
