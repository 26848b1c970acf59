from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

SortDirection = Literal["asc", "desc"]
StatusFilter = Literal["all", "active", "inactive"]

STATUS_ACTIVE = 1
STATUS_INACTIVE = 0


class Record(BaseModel):
    """One row of a master-data collection; entity fields ride along as extras."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    pubid: str
    encrypted_pid: str | None = Field(default=None, alias="encryptedPid")
    # Kept as sent; values outside 0/1 stay in the mirror and match neither status filter.
    status: Any = None

    @property
    def server_id(self) -> str:
        return self.encrypted_pid or self.pubid

    def value(self, field: str) -> Any:
        if field in type(self).model_fields:
            return getattr(self, field)
        return (self.model_extra or {}).get(field)

    def public_fields(self) -> dict[str, Any]:
        return self.model_dump(exclude={"encrypted_pid"})


class ListRequest(BaseModel):
    page: int = Field(default=1, ge=1)
    per_page: int = Field(default=10, gt=0)
    search_term: str = ""
    sort_column: int = 0
    sort_direction: SortDirection = "asc"

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.per_page


class ServerPaginationState(BaseModel):
    current_page: int = 1
    total_pages: int = 0
    total_items: int = 0
    filtered_items: int = 0
    per_page: int = 10


class ListPage(BaseModel):
    draw: int
    records: list[Record]
    meta: ServerPaginationState


class FilterState(BaseModel):
    search_term: str = ""
    status_filter: StatusFilter = "all"
    category_filter: str | None = None


class Stats(BaseModel):
    total: int = 0
    active: int = 0
    inactive: int = 0
    by_category: dict[str, int] = Field(default_factory=dict)
    aggregates: dict[str, float] = Field(default_factory=dict)


class MutationResult(BaseModel):
    success: bool
    message: str
    simulated: bool = False


class SessionData(BaseModel):
    access_token: str
    env_name: str | None = None
    username: str | None = None
