from __future__ import annotations

import time
import uuid
from dataclasses import dataclass
from typing import Any, Callable, Mapping
from urllib.parse import urljoin

import requests
from requests.adapters import HTTPAdapter

from .config import ClientConfig
from .error_mapper import map_error
from .exceptions import NetworkError, ParseError

TRACE_HEADER = "X-Request-ID"
TRACE_HEADER_ALIASES = (TRACE_HEADER, "X-Trace-ID", "X-Trace-Id")

RequestHook = Callable[[str, str, dict[str, Any]], None]


@dataclass
class LastOperation:
    module: str
    operation: str
    duration_ms: int
    result: str
    trace_id: str | None


@dataclass
class HttpClient:
    config: ClientConfig
    session: requests.Session | None = None
    before_request: RequestHook | None = None
    last_operation: LastOperation | None = None

    def __post_init__(self) -> None:
        if self.session is None:
            self.session = requests.Session()
            adapter = HTTPAdapter(
                pool_connections=self.config.max_connections,
                pool_maxsize=self.config.max_connections,
            )
            self.session.mount("http://", adapter)
            self.session.mount("https://", adapter)

    def _build_url(self, path: str) -> str:
        base = self.config.api_base_url.rstrip("/") + "/"
        return urljoin(base, path.lstrip("/"))

    def request(
        self,
        method: str,
        path: str,
        *,
        headers: Mapping[str, str] | None = None,
        json_body: dict[str, Any] | None = None,
        params: Mapping[str, Any] | None = None,
        module: str = "unknown",
        operation: str = "unknown",
    ) -> dict[str, Any] | list[Any] | None:
        if self.session is None:
            raise RuntimeError("HTTP session not initialized")
        trace_id = str(uuid.uuid4())
        request_headers = {"Accept": "application/json", "Content-Type": "application/json"}
        if headers:
            request_headers.update(headers)
        request_headers[TRACE_HEADER] = trace_id

        normalized_method = method.upper()
        url = self._build_url(path)
        if self.before_request:
            self.before_request(
                normalized_method,
                url,
                {"headers": request_headers, "json_body": json_body, "params": params},
            )

        started = time.monotonic()
        try:
            response = self.session.request(
                method=normalized_method,
                url=url,
                headers=request_headers,
                json=json_body,
                params=dict(params) if params else None,
                timeout=(self.config.connect_timeout_seconds, self.config.read_timeout_seconds),
                verify=self.config.verify_ssl,
            )
        except requests.RequestException as exc:
            self._record_operation(module, operation, started, "network_error", trace_id)
            raise NetworkError(
                code="NETWORK_ERROR",
                message=f"Network error: {exc}",
                details={"type": type(exc).__name__},
                trace_id=trace_id,
            ) from exc

        trace_id = _trace_from_headers(response.headers) or trace_id
        if response.ok:
            self._record_operation(module, operation, started, "success", trace_id)
            if not response.content:
                return None
            try:
                return response.json()
            except ValueError as exc:
                raise ParseError(
                    code="PARSE_ERROR",
                    message="Response body is not valid JSON",
                    details={"body": response.text[:200]},
                    trace_id=trace_id,
                    status_code=response.status_code,
                ) from exc

        try:
            payload = response.json()
        except ValueError:
            payload = {"message": response.text} if response.text else {}
        self._record_operation(module, operation, started, "error", trace_id)
        raise map_error(response.status_code, payload if isinstance(payload, dict) else {}, trace_id)

    def _record_operation(self, module: str, operation: str, started: float, result: str, trace_id: str | None) -> None:
        self.last_operation = LastOperation(
            module=module,
            operation=operation,
            duration_ms=int((time.monotonic() - started) * 1000),
            result=result,
            trace_id=trace_id,
        )


def _trace_from_headers(headers: Mapping[str, str]) -> str | None:
    for key in TRACE_HEADER_ALIASES:
        trace_id = headers.get(key)
        if trace_id:
            return trace_id
    return None
