"""End-to-end tests for the click CLI against JSON files in tmp_path."""

from datetime import date, timedelta

import pytest
from click.testing import CliRunner

from rentals.infrastructure.cli.main import cli


@pytest.fixture
def run(tmp_path):
    runner = CliRunner()

    def _run(*args: str):
        return runner.invoke(cli, ["--data-dir", str(tmp_path), *args])

    return _run


@pytest.fixture
def stocked(run):
    """A store with one category and one clothing set of 3 units."""
    assert run("category", "add", "--name", "Vest nam").exit_code == 0
    result = run(
        "set", "add",
        "--name", "Vest A",
        "--category", "Vest nam",
        "--quantity", "3",
        "--price", "100000",
    )
    assert result.exit_code == 0, result.output
    return run


def _book(run, start: str, end: str, items: str, customer: str = "Alice"):
    return run(
        "order", "create",
        "--customer", customer,
        "--phone", "0901234567",
        "--start", start,
        "--end", end,
        "--items", items,
    )


class TestCategoryCommands:

    def test_seed_then_list(self, run):
        result = run("category", "seed")
        assert result.exit_code == 0
        assert "6 default categories added" in result.output
        assert "Áo dài" in run("category", "list").output

    def test_show_lists_sets(self, stocked):
        result = stocked("category", "show", "--id", "1")
        assert result.exit_code == 0
        assert "Sets:   Vest A" in result.output

    def test_delete_in_use_category_fails(self, stocked):
        result = stocked("category", "delete", "--id", "1")
        assert result.exit_code == 1
        assert "still used by clothing set(s) Vest A" in result.output
        assert "Vest nam" in stocked("category", "list").output


class TestOrderCommands:

    def test_booking_flow(self, stocked):
        result = _book(stocked, "2024-07-01", "2024-07-05", "1:2")
        assert result.exit_code == 0, result.output
        assert "ORD-" in result.output
        assert "5 days" in result.output

        check = stocked("availability", "check", "--set", "1",
                        "--start", "2024-07-03", "--end", "2024-07-08")
        assert "1 of 3 available" in check.output

        refused = _book(stocked, "2024-07-04", "2024-07-06", "1:2", customer="Bob")
        assert refused.exit_code == 1
        assert "Available: 1, Requested: 2" in refused.output

        listing = stocked("order", "list")
        assert "Alice" in listing.output
        assert "Bob" not in listing.output

    def test_status_commands(self, stocked):
        _book(stocked, "2024-07-01", "2024-07-05", "1:3")

        assert stocked("order", "return", "--id", "1").exit_code == 1
        assert stocked("order", "ship", "--id", "1").exit_code == 0
        assert stocked("order", "return", "--id", "1").exit_code == 0

        check = stocked("availability", "quantity", "--set", "1",
                        "--start", "2024-07-01", "--end", "2024-07-05",
                        "--quantity", "3")
        assert "Available: yes" in check.output

    def test_invalid_status(self, stocked):
        _book(stocked, "2024-07-01", "2024-07-05", "1:1")
        result = stocked("order", "status", "--id", "1", "--to", "lost")
        assert result.exit_code == 1
        assert "Invalid status" in result.output

    def test_malformed_items_option(self, stocked):
        result = _book(stocked, "2024-07-01", "2024-07-05", "vest")
        assert result.exit_code == 2
        assert "Invalid item format" in result.output

    def test_show_missing_order(self, stocked):
        result = stocked("order", "show", "--id", "5")
        assert result.exit_code == 1
        assert "Order #5 not found" in result.output


class TestReportCommands:

    def test_calendar(self, stocked):
        _book(stocked, "2024-07-30", "2024-08-02", "1:1")
        result = stocked("calendar", "--year", "2024", "--month", "8")
        assert result.exit_code == 0
        assert "2024-08-01" in result.output
        assert "2024-07-31" not in result.output

    def test_dashboard(self, stocked):
        result = stocked("dashboard")
        assert result.exit_code == 0
        assert "Clothing sets:    1" in result.output

    def test_dashboard_with_other_configured_currency(self, stocked, tmp_path):
        today = date.today()
        _book(stocked, today.isoformat(), (today + timedelta(days=1)).isoformat(), "1:1")

        result = CliRunner().invoke(
            cli, ["--data-dir", str(tmp_path), "--currency", "USD", "dashboard"]
        )
        assert result.exit_code == 0, result.output
        assert "Cannot combine" not in result.output
        assert "Monthly revenue:" in result.output
