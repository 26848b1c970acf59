from __future__ import annotations

import argparse
import json
import os
from typing import Any, Sequence

from .auth_store import AuthProvider, AuthStore, StaticTokenAuth
from .config import ConfigError, load_config
from .controller import RemoteCollectionController
from .entities import ENTITIES
from .exceptions import ConsoleError
from .export import export_current_view, share_text
from .http_client import HttpClient
from .models import SessionData


def _auth(args: argparse.Namespace) -> AuthProvider:
    token = args.token or os.getenv("LIVESTOCK_TOKEN")
    if token:
        return StaticTokenAuth(token)
    return AuthStore()


def _controller(args: argparse.Namespace) -> RemoteCollectionController:
    config = load_config(args.env_file)
    http = HttpClient(config)
    return RemoteCollectionController.for_entity(args.entity, http, _auth(args), config)


def _parse_fields(pairs: Sequence[str]) -> dict[str, Any]:
    fields: dict[str, Any] = {}
    for pair in pairs:
        if "=" not in pair:
            raise SystemExit(f"Invalid --field {pair!r}: expected key=value")
        key, value = pair.split("=", 1)
        fields[key.strip()] = value.strip()
    return fields


def _print(payload: Any) -> None:
    print(json.dumps(payload, indent=2, default=str))


def cmd_list(args: argparse.Namespace) -> int:
    controller = _controller(args)
    controller.fetch(page=args.page, per_page=args.per_page, search_term=args.server_search)
    controller.set_search_term(args.search or "")
    controller.set_status_filter(args.status)
    controller.set_category_filter(args.category)
    records = controller.records
    if args.export_dir:
        headers = ["pubid", *controller.adapter.required_fields]
        path = export_current_view(
            kind=controller.adapter.kind,
            records=records,
            headers=headers,
            output_dir=args.export_dir,
            filters=controller.filters.model_dump(),
        )
        _print({"exported": str(path), "rows": len(records)})
        return 0
    _print(
        {
            "source": controller.mirror.source,
            "error": controller.error,
            "pagination": controller.pagination.model_dump(),
            "pages": controller.page_window(),
            "records": [record.public_fields() for record in records],
        }
    )
    return 0


def cmd_stats(args: argparse.Namespace) -> int:
    controller = _controller(args)
    controller.fetch()
    _print({"source": controller.mirror.source, "error": controller.error, "stats": controller.stats.model_dump()})
    return 0


def cmd_create(args: argparse.Namespace) -> int:
    controller = _controller(args)
    result = controller.create(_parse_fields(args.field))
    _print(result.model_dump())
    return 0 if result.success else 1


def cmd_update(args: argparse.Namespace) -> int:
    controller = _controller(args)
    controller.fetch()
    result = controller.update(args.pubid, _parse_fields(args.field))
    _print(result.model_dump())
    return 0 if result.success else 1


def cmd_delete(args: argparse.Namespace) -> int:
    controller = _controller(args)
    controller.fetch()
    result = controller.delete(args.pubid)
    _print(result.model_dump())
    return 0 if result.success and not result.simulated else 1


def cmd_share(args: argparse.Namespace) -> int:
    controller = _controller(args)
    controller.fetch()
    record = controller.mirror.find(args.pubid)
    if record is None:
        _print({"success": False, "message": f"{controller.adapter.label} not found: {args.pubid}"})
        return 1
    _print({"success": True, "text": share_text(record, controller.adapter.label)})
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    controller = _controller(args)
    result = controller.check_connection()
    _print(result.model_dump())
    return 0 if result.success else 1


def cmd_save_token(args: argparse.Namespace) -> int:
    store = AuthStore()
    store.save(SessionData(access_token=args.access_token, env_name=os.getenv("LIVESTOCK_ENV")))
    _print({"saved": True})
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="livestock-console", description="Master-data console client")
    parser.add_argument("--env-file", default=None)
    parser.add_argument("--token", default=None, help="Bearer token; defaults to LIVESTOCK_TOKEN or the saved session")
    subparsers = parser.add_subparsers(dest="command", required=True)

    def entity_parser(name: str, help_text: str) -> argparse.ArgumentParser:
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("entity", choices=sorted(ENTITIES))
        return sub

    list_parser = entity_parser("list", "List one page of records")
    list_parser.add_argument("--page", type=int, default=1)
    list_parser.add_argument("--per-page", type=int, default=None)
    list_parser.add_argument("--server-search", default=None)
    list_parser.add_argument("--search", default=None)
    list_parser.add_argument("--status", choices=["all", "active", "inactive"], default="all")
    list_parser.add_argument("--category", default=None)
    list_parser.add_argument("--export-dir", default=None)
    list_parser.set_defaults(func=cmd_list)

    stats_parser = entity_parser("stats", "Show header statistics")
    stats_parser.set_defaults(func=cmd_stats)

    create_parser = entity_parser("create", "Create a record")
    create_parser.add_argument("--field", action="append", default=[], metavar="KEY=VALUE")
    create_parser.set_defaults(func=cmd_create)

    update_parser = entity_parser("update", "Update a record")
    update_parser.add_argument("pubid")
    update_parser.add_argument("--field", action="append", default=[], metavar="KEY=VALUE")
    update_parser.set_defaults(func=cmd_update)

    delete_parser = entity_parser("delete", "Delete a record")
    delete_parser.add_argument("pubid")
    delete_parser.set_defaults(func=cmd_delete)

    share_parser = entity_parser("share", "Print a plain-text summary of one record")
    share_parser.add_argument("pubid")
    share_parser.set_defaults(func=cmd_share)

    check_parser = entity_parser("check", "Check the entity endpoint is reachable")
    check_parser.set_defaults(func=cmd_check)

    token_parser = subparsers.add_parser("save-token", help="Store a token issued by the login service")
    token_parser.add_argument("access_token")
    token_parser.set_defaults(func=cmd_save_token)
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        code = args.func(args)
    except ConfigError as exc:
        _print({"error": "CONFIG_ERROR", "message": str(exc)})
        raise SystemExit(1) from exc
    except ConsoleError as exc:
        _print({"error": exc.code, "message": exc.message, "trace_id": exc.trace_id})
        raise SystemExit(1) from exc
    raise SystemExit(code)


if __name__ == "__main__":
    main()
