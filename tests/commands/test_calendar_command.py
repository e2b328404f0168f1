"""Tests for the calendar command."""

from datetime import date, datetime, timezone

from typer.testing import CliRunner

from smartdash_cli.commands.calendar_command import tasks_per_day
from smartdash_cli.main import app
from smartdash_cli.models.task import Task

runner = CliRunner()


def test_tasks_per_day_counts_by_created_date():
    noon = datetime(2026, 10, 5, 12, 0)
    tasks = [
        Task(id="1", title="a", created_at=noon),
        Task(id="2", title="b", created_at=noon),
        Task(id="3", title="c", created_at=datetime(2026, 10, 6, 12, 0)),
        Task(id="4", title="d"),
    ]

    counts = tasks_per_day(tasks)

    assert counts == {date(2026, 10, 5): 2, date(2026, 10, 6): 1}


def test_tasks_per_day_converts_aware_times_to_local():
    moment = datetime(2026, 10, 5, 12, 0, tzinfo=timezone.utc)
    counts = tasks_per_day([Task(id="1", title="a", created_at=moment)])
    assert list(counts) == [moment.astimezone().date()]


def test_calendar_logged_out(app_context, backend):
    result = runner.invoke(app, ["calendar", "--year", "2026", "--month", "2"])

    assert result.exit_code == 0
    assert "February 2026" in result.output
    assert "28" in result.output
    assert backend.requests == []


def test_calendar_monday_first(app_context):
    result = runner.invoke(app, ["calendar", "--year", "2026", "--month", "2", "--monday"])

    header = next(line for line in result.output.splitlines() if "Mo" in line)
    assert header.index("Mo") < header.index("Su")


def test_calendar_marks_task_days_when_logged_in(logged_in_context, backend):
    backend.seed("Buy milk")

    result = runner.invoke(app, ["calendar", "--year", "2026", "--month", "10"])

    assert result.exit_code == 0
    assert "October 2026" in result.output
    assert "•" in result.output
    assert backend.requests_for("GET", "/tasks")


def test_calendar_no_tasks_skips_request(logged_in_context, backend):
    result = runner.invoke(
        app, ["calendar", "--year", "2026", "--month", "10", "--no-tasks"]
    )

    assert result.exit_code == 0
    assert backend.requests == []


def test_calendar_tasks_requires_login(app_context):
    result = runner.invoke(app, ["calendar", "--tasks"])

    assert result.exit_code == 3
    assert "Not logged in" in result.output


def test_calendar_invalid_month(app_context):
    result = runner.invoke(app, ["calendar", "--month", "13"])

    assert result.exit_code == 2
