"""
Integration tests for the econova CLI against a temporary SQLite database.
"""

import pytest
from typer.testing import CliRunner

from econova.cli.main import app, parse_settings

runner = CliRunner()


@pytest.fixture
def db_uri(tmp_path):
    uri = f"sqlite+aiosqlite:///{tmp_path / 'cli.db'}"
    result = runner.invoke(app, ["--db-uri", uri, "init-db"])
    assert result.exit_code == 0, result.output
    return uri


def test_provision_and_list(db_uri):
    result = runner.invoke(
        app,
        [
            "--db-uri", db_uri,
            "provision", "rosewood", "Rosewood Sand Hill",
            "--feature", "module.waste",
            "--feature", "module.energy",
            "--setting", "currency=USD",
        ],
    )

    assert result.exit_code == 0, result.output
    assert "/rosewood/dashboard" in result.output

    listing = runner.invoke(app, ["--db-uri", db_uri, "list-tenants"])
    assert listing.exit_code == 0
    assert "rosewood" in listing.output


def test_provision_existing_slug_exits_with_error(db_uri):
    runner.invoke(app, ["--db-uri", db_uri, "provision", "hotel-aqua", "Hotel Aqua"])

    result = runner.invoke(app, ["--db-uri", db_uri, "provision", "hotel-aqua", "Again"])

    assert result.exit_code == 1
    assert "already exists" in result.output


def test_recalculate_empty_tenant(db_uri):
    runner.invoke(app, ["--db-uri", db_uri, "provision", "hotel-aqua", "Hotel Aqua"])

    result = runner.invoke(
        app,
        ["--db-uri", db_uri, "recalculate", "hotel-aqua", "--kind", "true_year", "--year", "2025"],
    )

    assert result.exit_code == 0, result.output
    assert "Recalculation completed" in result.output


def test_recalculate_unknown_tenant(db_uri):
    result = runner.invoke(app, ["--db-uri", db_uri, "recalculate", "ghost"])

    assert result.exit_code == 1
    assert "TENANT_NOT_FOUND" in result.output


def test_parse_settings():
    assert parse_settings(["currency=USD", "greeting=a=b"]) == {
        "currency": "USD",
        "greeting": "a=b",
    }
