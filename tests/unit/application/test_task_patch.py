"""Unit tests for task patching – TaskRequest and populate_task_from_request."""
from __future__ import annotations

from datetime import UTC, datetime

import pytest

from taskquery.application.patch import TaskRequest, populate_task_from_request
from taskquery.kernel.errors import InvalidArgumentError
from taskquery.kernel.tasks import DelegationState, Task
from taskquery.kernel.types import Nothing, Some


def make_task() -> Task:
    return Task(
        id="t1",
        name="Original",
        description="desc",
        assignee="kermit",
        owner="gonzo",
        priority=50,
        category="finance",
        delegation_state=DelegationState.PENDING,
    )


class TestTaskRequest:
    def test_nothing_set_by_default(self):
        request = TaskRequest()
        assert request.set_fields() == []
        assert request.name == Nothing()

    def test_from_mapping_marks_present_keys(self):
        request = TaskRequest.from_mapping({"name": "New", "dueDate": None})
        assert request.set_fields() == ["name", "due_date"]
        assert request.due_date == Some(None)

    def test_from_mapping_accepts_snake_case(self):
        assert TaskRequest.from_mapping({"tenant_id": "acme"}).tenant_id == Some("acme")

    def test_from_mapping_rejects_unknown(self):
        with pytest.raises(InvalidArgumentError, match="Unknown task field: colour"):
            TaskRequest.from_mapping({"colour": "red"})


class TestPopulateTaskFromRequest:
    def test_only_set_fields_written(self):
        task = make_task()
        populate_task_from_request(task, TaskRequest(name=Some("Renamed")))
        assert task.name == "Renamed"
        assert task.assignee == "kermit"
        assert task.description == "desc"

    def test_explicit_none_clears(self):
        task = make_task()
        populate_task_from_request(task, TaskRequest.from_mapping({"assignee": None}))
        assert task.assignee is None
        assert task.owner == "gonzo"

    def test_all_plain_fields(self):
        due = datetime(2024, 6, 1, tzinfo=UTC)
        task = make_task()
        populate_task_from_request(
            task,
            TaskRequest.from_mapping(
                {
                    "name": "n",
                    "assignee": "a",
                    "description": "d",
                    "dueDate": due,
                    "owner": "o",
                    "parentTaskId": "p",
                    "priority": 80,
                    "category": "c",
                    "tenantId": "t",
                    "formKey": "f",
                }
            ),
        )
        assert (task.name, task.assignee, task.description, task.due_date) == ("n", "a", "d", due)
        assert (task.owner, task.parent_task_id, task.priority) == ("o", "p", 80)
        assert (task.category, task.tenant_id, task.form_key) == ("c", "t", "f")

    def test_delegation_state_resolved(self):
        task = make_task()
        populate_task_from_request(task, TaskRequest(delegation_state=Some("RESOLVED")))
        assert task.delegation_state is DelegationState.RESOLVED

    def test_delegation_state_cleared(self):
        task = make_task()
        populate_task_from_request(task, TaskRequest(delegation_state=Some(None)))
        assert task.delegation_state is None

    def test_invalid_delegation_state_leaves_task_untouched(self):
        task = make_task()
        request = TaskRequest(name=Some("Renamed"), delegation_state=Some("bogus"))
        with pytest.raises(InvalidArgumentError, match="Illegal value for delegationState: bogus"):
            populate_task_from_request(task, request)
        assert task.name == "Original"
        assert task.delegation_state is DelegationState.PENDING

    def test_empty_request_is_a_no_op(self):
        task = make_task()
        populate_task_from_request(task, TaskRequest())
        assert task.name == "Original"
        assert task.delegation_state is DelegationState.PENDING
