"""Tests for output formatters."""

from __future__ import annotations

import json

import pytest
import yaml

from tasklist.utils.ui.formatters import (
    format_error,
    format_output,
    format_success,
    format_tasks,
)


@pytest.fixture
def sample_tasks(make_task, at):
    return [make_task("Alpha", created=at(1)), make_task("Bravo", completed=at(4))]


def test_format_tasks_json(capsys, sample_tasks):
    format_tasks(sample_tasks, "json")

    data = json.loads(capsys.readouterr().out)
    assert [(d["position"], d["title"], d["is_complete"]) for d in data] == [
        (1, "Alpha", False),
        (2, "Bravo", True),
    ]


def test_format_tasks_yaml(capsys, sample_tasks):
    format_tasks(sample_tasks, "yaml")

    data = yaml.safe_load(capsys.readouterr().out)
    assert data[1]["title"] == "Bravo"
    assert data[1]["position"] == 2


def test_format_tasks_table(capsys, sample_tasks):
    format_tasks(sample_tasks, "table")

    out = capsys.readouterr().out
    assert "Alpha" in out
    assert "Bravo" in out
    assert "Created / Done" in out


def test_format_tasks_empty_table(capsys):
    format_tasks([], "table")

    assert "No tasks yet" in capsys.readouterr().out


def test_format_tasks_empty_json(capsys):
    format_tasks([], "json")

    assert json.loads(capsys.readouterr().out) == []


def test_format_output_flattens_nested_dict(capsys):
    format_output({"storage": {"backend": "sqlite", "path": None}}, "table")

    out = capsys.readouterr().out
    assert "storage.backend" in out
    assert "sqlite" in out


def test_messages(capsys):
    format_success("done")
    format_error("broken")

    out = capsys.readouterr().out
    assert "Success: done" in out
    assert "Error: broken" in out
