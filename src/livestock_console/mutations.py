from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

from .auth_store import AuthProvider
from .entities import EntityAdapter
from .exceptions import AuthMissingError, ConsoleError, HttpError, NetworkError, NotFoundError
from .http_client import HttpClient
from .logger import get_logger, log_action
from .mirror import CollectionMirror
from .models import STATUS_ACTIVE, STATUS_INACTIVE, MutationResult, Record
from .ui_errors import to_user_facing_error


def require_auth_header(auth: AuthProvider) -> dict[str, str]:
    headers = auth.get_auth_header() or {}
    if not headers.get("Authorization"):
        raise AuthMissingError(
            code="AUTH_MISSING",
            message="Authentication token not found. Please log in again.",
        )
    return dict(headers)


class MutationGateway:
    """Create/update/delete for one entity, always followed by a full resync."""

    def __init__(
        self,
        adapter: EntityAdapter,
        http: HttpClient,
        auth: AuthProvider,
        mirror: CollectionMirror,
        resync: Callable[[], object],
        logger: logging.Logger | None = None,
    ) -> None:
        self.adapter = adapter
        self.http = http
        self.auth = auth
        self.mirror = mirror
        self.resync = resync
        self.logger = logger or get_logger("livestock_console.mutations")
        self.last_error: ConsoleError | None = None

    def create(self, data: Mapping[str, Any]) -> MutationResult:
        try:
            payload = self.adapter.clean_payload(data)
            message = self._post("store", payload)
        except ConsoleError as exc:
            return self._failure("create", exc)
        return self._success("create", message or f"{self.adapter.label} added successfully")

    def update(self, pubid: str, data: Mapping[str, Any]) -> MutationResult:
        try:
            record = self._resolve(pubid)
            payload = {"pid": record.server_id, **self.adapter.clean_payload(data)}
            message = self._post("update", payload)
        except ConsoleError as exc:
            return self._failure("update", exc, pubid=pubid)
        return self._success("update", message or f"{self.adapter.label} updated successfully", pubid=pubid)

    def delete(self, pubid: str) -> MutationResult:
        try:
            record = self._resolve(pubid)
        except ConsoleError as exc:
            return self._failure("delete", exc, pubid=pubid)
        try:
            message = self._post("delete", {"pid": record.server_id})
        except (HttpError, NetworkError) as exc:
            return self._simulated_delete(pubid, exc)
        except ConsoleError as exc:
            return self._failure("delete", exc, pubid=pubid)
        return self._success("delete", message or f"{self.adapter.label} deleted successfully", pubid=pubid)

    def duplicate(self, pubid: str) -> MutationResult:
        source = self.mirror.find(pubid)
        if source is None:
            return self._failure("duplicate", self._not_found(pubid), pubid=pubid)
        if not self.adapter.supports_ordering:
            return self._failure(
                "duplicate",
                ConsoleError(code="UNSUPPORTED", message=f"{self.adapter.label} records cannot be duplicated"),
                pubid=pubid,
            )
        name = source.value("name") or ""
        orders = [_as_int(record.value("order_no")) for record in self.mirror]
        copy = {
            **{key: value for key, value in source.public_fields().items() if key != "pubid"},
            "name": f"{name} (Copy)",
            "description": f"{source.value('description') or ''} - Copy of {name}",
            "order_no": max(orders, default=0) + 1,
            "status": STATUS_INACTIVE,
        }
        return self.create(copy)

    def toggle_status(self, pubid: str) -> MutationResult:
        record = self.mirror.find(pubid)
        if record is None:
            return self._failure("toggle_status", self._not_found(pubid), pubid=pubid)
        new_status = STATUS_INACTIVE if record.status == STATUS_ACTIVE else STATUS_ACTIVE
        fields = {key: value for key, value in record.public_fields().items() if key != "pubid"}
        result = self.update(pubid, {**fields, "status": new_status})
        if not result.success:
            return result
        verb = "activated" if new_status == STATUS_ACTIVE else "deactivated"
        return MutationResult(success=True, message=f"{self.adapter.label} {verb} successfully")

    def _resolve(self, pubid: str) -> Record:
        record = self.mirror.find(pubid)
        if record is None:
            raise self._not_found(pubid)
        return record

    def _not_found(self, pubid: str) -> NotFoundError:
        return NotFoundError(
            code="NOT_FOUND",
            message=f"{self.adapter.label} not found: {pubid}",
            details={"pubid": pubid},
        )

    def _post(self, action: str, payload: dict[str, Any]) -> str | None:
        headers = require_auth_header(self.auth)
        result = self.http.request(
            "POST",
            self.adapter.endpoint(action),
            headers=headers,
            json_body=payload,
            module=self.adapter.kind,
            operation=action,
        )
        if isinstance(result, dict) and result.get("message"):
            return str(result["message"])
        return None

    def _success(self, action: str, message: str, *, pubid: str | None = None) -> MutationResult:
        self.last_error = None
        log_action(self.logger, self.adapter.kind, action, "success", self._trace_id(), pubid=pubid)
        self.resync()
        return MutationResult(success=True, message=message)

    def _failure(self, action: str, exc: ConsoleError, *, pubid: str | None = None) -> MutationResult:
        self.last_error = exc
        log_action(
            self.logger,
            self.adapter.kind,
            action,
            "error",
            exc.trace_id,
            level=logging.WARNING,
            pubid=pubid,
            error_code=exc.code,
        )
        return MutationResult(success=False, message=to_user_facing_error(exc).banner())

    def _simulated_delete(self, pubid: str, exc: ConsoleError) -> MutationResult:
        self.last_error = exc
        self.mirror.remove_local(pubid)
        log_action(
            self.logger,
            self.adapter.kind,
            "delete",
            "simulated",
            exc.trace_id,
            level=logging.WARNING,
            pubid=pubid,
            error_code=exc.code,
        )
        reason = to_user_facing_error(exc).banner()
        return MutationResult(
            success=True,
            simulated=True,
            message=f"{self.adapter.label} removed locally only (simulated delete, server said: {reason})",
        )

    def _trace_id(self) -> str | None:
        operation = self.http.last_operation
        return operation.trace_id if operation else None


def _as_int(value: object) -> int:
    try:
        return int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 0
