from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ScreenMode(str, Enum):
    IDLE = "idle"
    VIEWING = "viewing"
    EDITING = "editing"
    CONFIRMING_DELETE = "confirming_delete"
    ADDING = "adding"


_NEEDS_RECORD = {ScreenMode.VIEWING, ScreenMode.EDITING, ScreenMode.CONFIRMING_DELETE}

_ALLOWED: dict[ScreenMode, set[ScreenMode]] = {
    ScreenMode.IDLE: {ScreenMode.VIEWING, ScreenMode.EDITING, ScreenMode.CONFIRMING_DELETE, ScreenMode.ADDING},
    ScreenMode.VIEWING: {ScreenMode.IDLE, ScreenMode.EDITING, ScreenMode.CONFIRMING_DELETE},
    ScreenMode.EDITING: {ScreenMode.IDLE},
    ScreenMode.CONFIRMING_DELETE: {ScreenMode.IDLE},
    ScreenMode.ADDING: {ScreenMode.IDLE},
}


class ScreenStateError(ValueError):
    pass


@dataclass(frozen=True)
class ScreenState:
    """Which modal a master-data screen is showing; at most one at a time."""

    mode: ScreenMode = ScreenMode.IDLE
    record_id: str | None = None

    def __post_init__(self) -> None:
        if self.mode in _NEEDS_RECORD and not self.record_id:
            raise ScreenStateError(f"{self.mode.value} requires a record id")
        if self.mode not in _NEEDS_RECORD and self.record_id is not None:
            raise ScreenStateError(f"{self.mode.value} does not take a record id")

    def _to(self, mode: ScreenMode, record_id: str | None = None) -> "ScreenState":
        if mode not in _ALLOWED[self.mode]:
            raise ScreenStateError(f"Cannot go from {self.mode.value} to {mode.value}")
        return ScreenState(mode=mode, record_id=record_id)

    def view(self, record_id: str) -> "ScreenState":
        return self._to(ScreenMode.VIEWING, record_id)

    def edit(self, record_id: str) -> "ScreenState":
        return self._to(ScreenMode.EDITING, record_id)

    def confirm_delete(self, record_id: str) -> "ScreenState":
        return self._to(ScreenMode.CONFIRMING_DELETE, record_id)

    def add(self) -> "ScreenState":
        return self._to(ScreenMode.ADDING)

    def dismiss(self) -> "ScreenState":
        if self.mode is ScreenMode.IDLE:
            return self
        return self._to(ScreenMode.IDLE)


@dataclass(frozen=True)
class ScreenActionAvailability:
    can_add: bool
    can_open_record: bool
    can_submit_form: bool
    can_confirm_delete: bool


def screen_action_availability(state: ScreenState, *, loading: bool) -> ScreenActionAvailability:
    if loading:
        return ScreenActionAvailability(False, False, False, False)
    mode = state.mode
    return ScreenActionAvailability(
        can_add=mode is ScreenMode.IDLE,
        can_open_record=mode in {ScreenMode.IDLE, ScreenMode.VIEWING},
        can_submit_form=mode in {ScreenMode.EDITING, ScreenMode.ADDING},
        can_confirm_delete=mode is ScreenMode.CONFIRMING_DELETE,
    )
