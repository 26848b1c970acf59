from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

from . import fallback_catalog
from .auth_store import AuthProvider
from .config import ClientConfig
from .entities import EntityAdapter, get_entity
from .exceptions import ConsoleError
from .filters import ClientFilterEngine
from .http_client import HttpClient
from .logger import get_logger, log_action
from .mirror import CollectionMirror
from .models import (
    FilterState,
    ListRequest,
    MutationResult,
    Record,
    ServerPaginationState,
    SortDirection,
    Stats,
    StatusFilter,
)
from .mutations import MutationGateway, require_auth_header
from .page_controls import DEFAULT_WINDOW, PageControls, can_change_page
from .pagination import build_query, parse
from .ui_errors import to_user_facing_error

FallbackSource = Callable[[str], list[Record]]


class RemoteCollectionController:
    """Stateful mirror of one master-data collection, one instance per screen.

    ``fetch`` never raises for remote failures: the mirror falls back to the
    built-in catalog and ``error`` carries the message the screen shows.
    """

    def __init__(
        self,
        adapter: EntityAdapter,
        http: HttpClient,
        auth: AuthProvider,
        *,
        per_page: int = 10,
        page_window: int = DEFAULT_WINDOW,
        fallback: FallbackSource = fallback_catalog.get,
        logger: logging.Logger | None = None,
    ) -> None:
        self.adapter = adapter
        self.http = http
        self.auth = auth
        self.fallback = fallback
        self.logger = logger or get_logger("livestock_console.controller")
        self.mirror = CollectionMirror()
        self.engine = ClientFilterEngine.for_entity(adapter)
        self.filters = FilterState()
        self.request = ListRequest(per_page=per_page)
        self.pagination = ServerPaginationState(per_page=per_page)
        self.page_window_size = page_window
        self.loading = False
        self.error: str | None = None
        self.last_exception: ConsoleError | None = None
        self._sequence = 0
        self.gateway = MutationGateway(adapter, http, auth, self.mirror, self.fetch, logger=self.logger)

    @classmethod
    def for_entity(
        cls,
        kind: str,
        http: HttpClient,
        auth: AuthProvider,
        config: ClientConfig | None = None,
    ) -> "RemoteCollectionController":
        cfg = config or http.config
        return cls(get_entity(kind), http, auth, per_page=cfg.per_page, page_window=cfg.page_window)

    # -- remote list -----------------------------------------------------

    def fetch(
        self,
        *,
        page: int | None = None,
        per_page: int | None = None,
        search_term: str | None = None,
        sort_column: int | None = None,
        sort_direction: SortDirection | None = None,
    ) -> bool:
        updates: dict[str, Any] = {
            "page": page,
            "per_page": per_page,
            "search_term": search_term,
            "sort_column": sort_column,
            "sort_direction": sort_direction,
        }
        request = ListRequest.model_validate(
            {**self.request.model_dump(), **{key: value for key, value in updates.items() if value is not None}}
        )
        self._sequence += 1
        sequence = self._sequence
        self.loading = True
        self.error = None
        try:
            headers = require_auth_header(self.auth)
            raw = self.http.request(
                "GET",
                self.adapter.endpoint("data"),
                headers=headers,
                params=build_query(request, self.adapter.discriminator),
                module=self.adapter.kind,
                operation="list",
            )
            page_data = parse(raw, request, self.adapter.map_wire_to_record)
        except ConsoleError as exc:
            if self._is_stale(sequence):
                return False
            self._fall_back(exc)
            return False
        finally:
            if not self._is_stale(sequence):
                self.loading = False

        if self._is_stale(sequence):
            log_action(self.logger, self.adapter.kind, "list", "discarded_stale", self._trace_id(), sequence=sequence)
            return False
        self.mirror.replace(page_data.records, source="remote")
        self.pagination = page_data.meta
        self.request = request
        self.last_exception = None
        log_action(
            self.logger,
            self.adapter.kind,
            "list",
            "success",
            self._trace_id(),
            page=request.page,
            records=len(page_data.records),
            total_items=page_data.meta.total_items,
        )
        return True

    def refresh(self) -> bool:
        return self.fetch()

    def check_connection(self) -> MutationResult:
        try:
            headers = require_auth_header(self.auth)
            self.http.request(
                "HEAD",
                self.adapter.endpoint("data"),
                headers=headers,
                module=self.adapter.kind,
                operation="check_connection",
            )
        except ConsoleError as exc:
            return MutationResult(success=False, message=to_user_facing_error(exc).banner("API connection failed"))
        return MutationResult(success=True, message="API connection succeeded")

    def _fall_back(self, exc: ConsoleError) -> None:
        self.last_exception = exc
        self.error = to_user_facing_error(exc).banner("API Error")
        self.mirror.replace(self.fallback(self.adapter.kind), source="fallback")
        log_action(
            self.logger,
            self.adapter.kind,
            "list",
            "fallback",
            exc.trace_id,
            level=logging.WARNING,
            error_code=exc.code,
            status_code=exc.status_code,
        )

    def _is_stale(self, sequence: int) -> bool:
        return sequence != self._sequence

    def _trace_id(self) -> str | None:
        operation = self.http.last_operation
        return operation.trace_id if operation else None

    # -- paging ----------------------------------------------------------

    @property
    def page_controls(self) -> PageControls:
        return PageControls(
            current_page=self.pagination.current_page,
            total_pages=self.pagination.total_pages,
            per_page=self.pagination.per_page,
            total_items=self.pagination.total_items,
            window=self.page_window_size,
        )

    def page_window(self) -> list[int]:
        return self.page_controls.pages

    def go_to_page(self, page: int) -> bool:
        if not can_change_page(
            page,
            current_page=self.pagination.current_page,
            total_pages=self.pagination.total_pages,
            loading=self.loading,
        ):
            return False
        return self.fetch(page=page)

    def next_page(self) -> bool:
        return self.go_to_page(self.pagination.current_page + 1)

    def previous_page(self) -> bool:
        return self.go_to_page(self.pagination.current_page - 1)

    def set_per_page(self, per_page: int) -> bool:
        if self.loading or per_page == self.request.per_page:
            return False
        return self.fetch(page=1, per_page=per_page)

    # -- client-side view ------------------------------------------------

    def set_search_term(self, term: str) -> None:
        self.filters = self.filters.model_copy(update={"search_term": term})

    def set_status_filter(self, status: StatusFilter) -> None:
        self.filters = FilterState.model_validate({**self.filters.model_dump(), "status_filter": status})

    def set_category_filter(self, category: str | None) -> None:
        self.filters = self.filters.model_copy(update={"category_filter": category})

    @property
    def records(self) -> list[Record]:
        return self.engine.apply(self.mirror.records, self.filters)

    @property
    def stats(self) -> Stats:
        return self.engine.stats(self.mirror.records)

    @property
    def categories(self) -> list[str]:
        return self.engine.categories(self.mirror.records)

    @property
    def is_fallback(self) -> bool:
        return self.mirror.source == "fallback"

    # -- mutations -------------------------------------------------------

    def create(self, data: Mapping[str, Any]) -> MutationResult:
        return self._mutate(lambda: self.gateway.create(data))

    def update(self, pubid: str, data: Mapping[str, Any]) -> MutationResult:
        return self._mutate(lambda: self.gateway.update(pubid, data))

    def delete(self, pubid: str) -> MutationResult:
        return self._mutate(lambda: self.gateway.delete(pubid))

    def duplicate(self, pubid: str) -> MutationResult:
        return self._mutate(lambda: self.gateway.duplicate(pubid))

    def toggle_status(self, pubid: str) -> MutationResult:
        return self._mutate(lambda: self.gateway.toggle_status(pubid))

    def _mutate(self, operation: Callable[[], MutationResult]) -> MutationResult:
        self.loading = True
        self.error = None
        try:
            result = operation()
        finally:
            self.loading = False
        if not result.success or result.simulated:
            self.error = result.message
            self.last_exception = self.gateway.last_error
        return result
