from __future__ import annotations

import json

import pytest
import responses

from livestock_console.cli import build_parser, main

from conftest import BASE_URL, SUPPLIER_ROWS, list_body


@pytest.fixture
def cli_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> list[str]:
    for key in ("LIVESTOCK_ENV", "LIVESTOCK_PER_PAGE", "LIVESTOCK_PAGE_WINDOW", "LIVESTOCK_TOKEN"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("LIVESTOCK_API_BASE_URL", BASE_URL)
    return ["--env-file", str(tmp_path / "missing.env"), "--token", "cli-token"]


def _run(argv: list[str], capsys: pytest.CaptureFixture[str]) -> tuple[int, dict]:
    with pytest.raises(SystemExit) as exc:
        main(argv)
    return exc.value.code, json.loads(capsys.readouterr().out)


@responses.activate
def test_list_prints_filtered_page(cli_env: list[str], capsys: pytest.CaptureFixture[str]) -> None:
    responses.add(
        responses.GET,
        f"{BASE_URL}/api/master/supplier/data",
        json=list_body(SUPPLIER_ROWS, total=3),
        status=200,
    )

    code, output = _run([*cli_env, "list", "suppliers", "--status", "active"], capsys)

    assert code == 0
    assert output["source"] == "remote"
    assert [row["pubid"] for row in output["records"]] == ["S1", "S3"]
    assert output["pages"] == [1]
    assert responses.calls[0].request.headers["Authorization"] == "Bearer cli-token"


@responses.activate
def test_stats_reports_fallback(cli_env: list[str], capsys: pytest.CaptureFixture[str]) -> None:
    responses.add(responses.GET, f"{BASE_URL}/api/master/produk/data", status=500)

    code, output = _run([*cli_env, "stats", "products"], capsys)

    assert code == 0
    assert output["source"] == "fallback"
    assert output["error"].startswith("API Error: Server error")
    assert output["stats"]["aggregates"]["low_stock"] == 1.0


@responses.activate
def test_create_with_missing_fields_fails(cli_env: list[str], capsys: pytest.CaptureFixture[str]) -> None:
    code, output = _run([*cli_env, "create", "suppliers", "--field", "name=Feed"], capsys)

    assert code == 1
    assert output["success"] is False
    assert len(responses.calls) == 0


def test_missing_base_url_is_a_config_error(
    monkeypatch: pytest.MonkeyPatch, tmp_path, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.delenv("LIVESTOCK_API_BASE_URL", raising=False)
    monkeypatch.delenv("LIVESTOCK_ENV", raising=False)

    code, output = _run(["--env-file", str(tmp_path / "missing.env"), "check", "suppliers"], capsys)

    assert code == 1
    assert output["error"] == "CONFIG_ERROR"


def test_parser_rejects_unknown_entity() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(["list", "cattle"])


@responses.activate
def test_share_prints_summary(cli_env: list[str], capsys: pytest.CaptureFixture[str]) -> None:
    responses.add(responses.GET, f"{BASE_URL}/api/master/supplier/data", json=list_body(SUPPLIER_ROWS), status=200)

    code, output = _run([*cli_env, "share", "suppliers", "S2"], capsys)

    assert code == 0
    assert output["text"].splitlines() == ["Supplier: Vet Supply", "Description: Medicine", "Status: Inactive"]

    code, output = _run([*cli_env, "share", "suppliers", "S7"], capsys)
    assert code == 1
    assert output["message"] == "Supplier not found: S7"
