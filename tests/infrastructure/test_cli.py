"""End-to-end tests for the click CLI against a temporary JSON store."""

import re
import uuid

import pytest
from click.testing import CliRunner

from catalog.infrastructure.cli import main
from catalog.infrastructure.config import get_settings


@pytest.fixture
def run(tmp_path, monkeypatch):
    monkeypatch.setenv("CATALOG_DATA_FILE", str(tmp_path / "products.json"))
    monkeypatch.setattr(main, "configure_logging", lambda settings: None)
    get_settings.cache_clear()
    runner = CliRunner()

    def invoke(*args):
        return runner.invoke(main.cli, list(args))

    yield invoke
    get_settings.cache_clear()


def _create(run, name, price) -> str:
    result = run("product", "create", "--name", name, "--price", price)
    assert result.exit_code == 0, result.output
    return re.search(r"Product (\S+) ", result.output).group(1)


def test_create_and_show(run):
    product_id = _create(run, "Lamp", "9.99")
    result = run("product", "show", "--id", product_id)
    assert result.exit_code == 0
    assert "Lamp" in result.output
    assert "9.99" in result.output


def test_negative_price_rejected(run):
    result = run("product", "create", "--name", "Lamp", "--price", "-1")
    assert result.exit_code != 0
    assert "cannot be negative" in result.output


def test_list_pages(run):
    for name in ("A", "B", "C"):
        _create(run, name, "1")
    result = run("product", "list", "--page", "2", "--limit", "2")
    assert result.exit_code == 0
    assert "C" in result.output
    assert "Page 2 of 2 (3 available)" in result.output


def test_list_empty(run):
    result = run("product", "list")
    assert "No products found." in result.output


def test_update(run):
    product_id = _create(run, "Lamp", "9.99")
    result = run("product", "update", "--id", product_id, "--price", "12")
    assert result.exit_code == 0
    assert "12.00" in result.output


def test_update_requires_a_field(run):
    product_id = _create(run, "Lamp", "9.99")
    result = run("product", "update", "--id", product_id)
    assert result.exit_code != 0
    assert "Nothing to update" in result.output


def test_delete_twice(run):
    product_id = _create(run, "Lamp", "9.99")
    assert run("product", "delete", "--id", product_id).exit_code == 0
    second = run("product", "delete", "--id", product_id)
    assert second.exit_code != 0
    assert "already unavailable" in second.output


def test_validate(run):
    product_id = _create(run, "Lamp", "9.99")
    missing = str(uuid.uuid4())
    assert run("product", "validate", product_id).exit_code == 0
    result = run("product", "validate", product_id, missing)
    assert result.exit_code != 0
    assert missing in result.output


def test_show_rejects_malformed_id(run):
    result = run("product", "show", "--id", "not-a-uuid")
    assert result.exit_code == 2
