"""Tests for the Task model."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from tasklist.models import Task


class TestTaskCreation:
    def test_new_task_is_incomplete_with_identity(self):
        task = Task.new("Buy milk")
        assert task.title == "Buy milk"
        assert task.is_complete is False
        assert task.completed_date is None
        assert task.id
        assert task.created_date.tzinfo is not None

    def test_new_tasks_get_distinct_ids(self):
        assert Task.new("a").id != Task.new("b").id

    def test_title_is_stripped(self):
        assert Task.new("  Walk dog  ").title == "Walk dog"

    def test_blank_title_rejected(self):
        with pytest.raises(ValidationError):
            Task.new("   ")

    def test_blank_note_becomes_none(self):
        assert Task.new("x", note="  ").note is None

    def test_naive_datetimes_are_treated_as_utc(self):
        task = Task(title="x", created_date=datetime(2024, 1, 1, 9, 0))
        assert task.created_date == datetime(2024, 1, 1, 9, 0, tzinfo=UTC)


class TestCompletionInvariant:
    def test_incomplete_record_drops_completed_date(self, at):
        task = Task(title="x", is_complete=False, completed_date=at(5))
        assert task.completed_date is None

    def test_complete_record_without_date_is_accepted(self):
        task = Task(title="x", is_complete=True)
        assert task.is_complete is True
        assert task.completed_date is None

    def test_set_complete_stamps_date(self, make_task, at):
        task = make_task("x").set_complete(True, at=at(7))
        assert task.is_complete is True
        assert task.completed_date == at(7)

    def test_set_complete_defaults_to_now(self, make_task):
        before = datetime.now(UTC)
        task = make_task("x").set_complete(True)
        assert task.completed_date is not None
        assert task.completed_date >= before

    def test_set_incomplete_clears_date(self, make_task, at):
        task = make_task("x", completed=at(7)).set_complete(False)
        assert task.is_complete is False
        assert task.completed_date is None

    @pytest.mark.parametrize("start_complete", [False, True])
    def test_toggled_keeps_flag_and_date_consistent(self, start_complete, make_task, at):
        task = make_task("x", completed=at(3) if start_complete else None)
        toggled = task.toggled(at=at(9))
        assert toggled.is_complete is not start_complete
        assert (toggled.completed_date is not None) == toggled.is_complete

    def test_toggle_does_not_mutate_original(self, make_task):
        task = make_task("x")
        task.toggled()
        assert task.is_complete is False


class TestEdited:
    def test_edited_preserves_identity_and_state(self, make_task, at):
        task = make_task("old", created=at(1), completed=at(2))
        edited = task.edited(title="new", note="n")
        assert edited.id == task.id
        assert edited.created_date == task.created_date
        assert edited.is_complete is True
        assert edited.completed_date == at(2)
        assert edited.title == "new"
        assert edited.note == "n"

    def test_edited_without_title_keeps_title(self, make_task):
        task = make_task("keep", note="old note")
        assert task.edited(note=None).title == "keep"
        assert task.edited(note=None).note is None

    def test_edited_rejects_blank_title(self, make_task):
        with pytest.raises(ValidationError):
            make_task("x").edited(title=" ")

    def test_json_round_trip_keeps_fields(self, make_task, at):
        task = make_task("x", completed=at(4), note="n", due_date=at(12))
        assert Task.model_validate_json(task.model_dump_json()) == task
