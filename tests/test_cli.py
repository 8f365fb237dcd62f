"""Tests for the command line interface."""

import re

import pytest
from click.testing import CliRunner

from gymbuddy.cli import main
from gymbuddy.commands.base import format_number, format_table


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def initialized(runner, cli_env):
    result = runner.invoke(main, ["init"])
    assert result.exit_code == 0, result.output
    return cli_env


class TestFormatting:
    def test_format_table(self):
        table = format_table(["Name", "Reps"], [["Squat", "5"], ["Bench Press", "8"]])
        lines = table.splitlines()

        assert lines[0].split() == ["Name", "Reps"]
        assert set(lines[1].replace(" ", "")) == {"-"}
        assert lines[3].startswith("Bench Press")

    def test_format_table_empty(self):
        assert format_table(["Name"], []) == ""

    @pytest.mark.parametrize(
        "value, expected", [(None, "-"), (100.0, "100"), (62.5, "62.5"), (8, "8")]
    )
    def test_format_number(self, value, expected):
        assert format_number(value) == expected


class TestInit:
    def test_init_creates_and_seeds(self, runner, cli_env):
        result = runner.invoke(main, ["init"])

        assert result.exit_code == 0, result.output
        assert cli_env.exists()
        assert "Exercise library populated" in result.output

    def test_init_twice_is_harmless(self, runner, initialized):
        result = runner.invoke(main, ["init"])

        assert result.exit_code == 0
        assert "already populated" in result.output

    def test_commands_require_init(self, runner, cli_env):
        result = runner.invoke(main, ["routines", "list"])

        assert result.exit_code == 1
        assert "gymbuddy init" in result.output


class TestExercisesCommands:
    def test_groups(self, runner, initialized):
        result = runner.invoke(main, ["exercises", "groups"])

        assert result.exit_code == 0
        assert "Chest" in result.output.splitlines()

    def test_search(self, runner, initialized):
        result = runner.invoke(main, ["exercises", "search", "bench", "--group", "Chest"])

        assert result.exit_code == 0
        assert "Barbell Bench Press" in result.output
        assert "Back Squat" not in result.output

    def test_search_without_matches(self, runner, initialized):
        result = runner.invoke(main, ["exercises", "search", "zzz-not-here"])

        assert result.exit_code == 0
        assert "No exercises found" in result.output

    def test_add(self, runner, initialized):
        result = runner.invoke(main, ["exercises", "add", "Sled Push", "-b", "Legs"])

        assert result.exit_code == 0
        assert "Added Sled Push (ID: cus_" in result.output

        found = runner.invoke(main, ["exercises", "search", "sled"])
        assert "Sled Push" in found.output
        assert "yes" in found.output

    def test_add_blank_name_fails(self, runner, initialized):
        result = runner.invoke(main, ["exercises", "add", "  "])

        assert result.exit_code == 1
        assert "name required" in result.output


class TestRoutinesCommands:
    def test_create_list_show(self, runner, initialized):
        created = runner.invoke(main, ["routines", "create", "Push day"])
        assert created.exit_code == 0
        routine_id = re.search(r"ID: (rut_\w+)", created.output).group(1)

        listed = runner.invoke(main, ["routines", "list"])
        assert routine_id in listed.output
        assert "Total: 1 routine(s)" in listed.output

        shown = runner.invoke(main, ["routines", "show", routine_id])
        assert shown.exit_code == 0
        assert "Routine: Push day" in shown.output
        assert "No exercises yet" in shown.output

    def test_create_without_name_uses_default(self, runner, initialized):
        result = runner.invoke(main, ["routines", "create"])

        assert "Created routine Routine" in result.output

    def test_list_empty(self, runner, initialized):
        result = runner.invoke(main, ["routines", "list"])

        assert "No routines found" in result.output

    def test_show_unknown(self, runner, initialized):
        result = runner.invoke(main, ["routines", "show", "rut_missing"])

        assert result.exit_code == 1
        assert "not found" in result.output


class TestMarksCommand:
    def test_no_records(self, runner, initialized):
        result = runner.invoke(main, ["marks"])

        assert result.exit_code == 0
        assert "No records yet" in result.output
