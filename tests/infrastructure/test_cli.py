"""End-to-end tests for the click CLI against a temporary data directory."""

import json
import logging
from decimal import Decimal

import pytest
from click.testing import CliRunner

from stockmaster.infrastructure.bootstrap import DATA_DIR_ENV, state_repository
from stockmaster.infrastructure.cli.main import cli


@pytest.fixture(autouse=True)
def data_dir(tmp_path, monkeypatch):
    monkeypatch.setenv(DATA_DIR_ENV, str(tmp_path / "data"))
    yield tmp_path / "data"
    logger = logging.getLogger("stockmaster")
    logger.handlers = []
    logger.setLevel(logging.NOTSET)


def _run(*args: str):
    result = CliRunner().invoke(cli, list(args))
    return result


def _active_project():
    return state_repository().load().active_project


class TestProjectCommands:

    def test_create_and_list(self):
        result = _run("project", "create", "--name", "Shop A")
        assert result.exit_code == 0, result.output
        assert "Project 'Shop A' created" in result.output

        result = _run("project", "list")
        assert "Shop A" in result.output
        assert result.output.splitlines()[-1].startswith("*")

    def test_list_shows_alert_counts(self):
        _run("project", "create", "--name", "Shop A")
        _run("product", "add", "--title", "Widget", "--price", "1", "--stock", "50")
        _run("product", "add", "--title", "Gadget", "--price", "1", "--stock", "2")
        _run("product", "add", "--title", "Gizmo", "--price", "1", "--stock", "0")

        lines = _run("project", "list").output.splitlines()

        assert lines[0].split()[-2:] == ["Alerts", "Low"]
        assert lines[-1].split()[-2:] == ["1", "2"]

    def test_list_when_empty(self):
        result = _run("project", "list")
        assert result.exit_code == 0
        assert "No projects found." in result.output

    def test_rename_and_delete(self):
        _run("project", "create", "--name", "Shop A")
        project_id = _active_project().id

        _run("project", "rename", "--id", project_id, "--name", "Shop B")
        assert _active_project().name == "Shop B"

        result = _run("project", "delete", "--id", project_id, "--yes")
        assert result.exit_code == 0
        assert state_repository().load().projects == ()

    def test_select_unknown_project_fails(self):
        result = _run("project", "select", "--id", "nope")
        assert result.exit_code != 0
        assert "not found" in result.output

    def test_export_and_import(self, tmp_path):
        _run("project", "create", "--name", "Main Store")
        project_id = _active_project().id

        result = _run("project", "export", "--id", project_id, "--out-dir", str(tmp_path))
        assert result.exit_code == 0, result.output
        exported = tmp_path / "Main_Store_stock_data.json"
        assert json.loads(exported.read_text())["name"] == "Main Store"

        result = _run("project", "import", str(exported))
        assert result.exit_code == 0, result.output
        projects = state_repository().load().projects
        assert [p.name for p in projects] == ["Main Store", "Main Store"]
        assert projects[0].id != projects[1].id

    def test_import_malformed_file(self, tmp_path):
        bad = tmp_path / "bad.json"
        bad.write_text("{nope", encoding="utf-8")

        result = _run("project", "import", str(bad))

        assert result.exit_code != 0
        assert "Invalid file format" in result.output


class TestProductAndStockCommands:

    def test_product_requires_active_project(self):
        result = _run("product", "list")
        assert result.exit_code != 0
        assert "No active project" in result.output

    def test_add_adjust_and_history(self):
        _run("project", "create", "--name", "Shop A")
        result = _run("product", "add", "--title", "Widget", "--price", "100", "--stock", "10")
        assert result.exit_code == 0, result.output
        product_id = _active_project().products[0].id

        result = _run("stock", "out", "--id", product_id, "--quantity", "15")
        assert "stock is now 0" in result.output
        result = _run("stock", "in", "--id", product_id, "--quantity", "3")
        assert "stock is now 3" in result.output

        history = _run("stock", "history").output.splitlines()
        assert "Widget" in history[2] and "+3" in history[2]
        assert "-15" in history[3]

    def test_edit_keeps_omitted_fields(self):
        _run("project", "create", "--name", "Shop A")
        _run("product", "add", "--title", "Widget", "--price", "100")
        product_id = _active_project().products[0].id

        _run("product", "edit", "--id", product_id, "--price", "80")

        product = _active_project().find_product(product_id)
        assert product.title == "Widget"
        assert product.mrp == Decimal("80")

    def test_search_and_low_stock_flag(self):
        _run("project", "create", "--name", "Shop A")
        _run("product", "add", "--title", "Widget", "--price", "1", "--stock", "50")
        _run("product", "add", "--title", "Gadget", "--price", "1", "--stock", "2")

        output = _run("product", "list", "--search", "gad").output

        assert "Gadget" in output and "LOW" in output
        assert "Widget" not in output

    def test_deleted_product_shows_as_unknown_in_history(self):
        _run("project", "create", "--name", "Shop A")
        _run("product", "add", "--title", "Widget", "--price", "1", "--stock", "1")
        product_id = _active_project().products[0].id
        _run("stock", "in", "--id", product_id)
        _run("product", "delete", "--id", product_id)

        output = _run("stock", "history").output

        assert "Unknown Product" in output

    def test_zero_quantity_rejected(self):
        _run("project", "create", "--name", "Shop A")
        _run("product", "add", "--title", "Widget", "--price", "1")
        product_id = _active_project().products[0].id

        result = _run("stock", "in", "--id", product_id, "--quantity", "0")

        assert result.exit_code == 2
