"""Unit tests for task search – TaskFilterCompiler."""
from __future__ import annotations

from datetime import UTC, datetime

import pytest
from hypothesis import given

from taskquery.application.query import (
    Criterion,
    CriterionKind,
    VariableOperation,
    VariableScope,
)
from taskquery.application.search import TaskFilterCompiler, TaskQueryRequest
from taskquery.application.variables import VariablePredicate
from taskquery.kernel.errors import InvalidArgumentError, UnauthorizedError
from taskquery.kernel.tasks import DelegationState
from taskquery.testing.fakes import DenyingAccessInterceptor, RecordingAccessInterceptor
from taskquery.testing.generators import task_query_request_strategy

MOMENT = datetime(2024, 3, 1, 12, 0, tzinfo=UTC)


def compile_request(**fields) -> list[Criterion]:
    return TaskFilterCompiler().compile(TaskQueryRequest(**fields)).criteria


# ---------------------------------------------------------------------------
# Value filters
# ---------------------------------------------------------------------------


class TestValueFilters:
    @pytest.mark.parametrize(
        "field, value, kind",
        [
            ("name", "Review", CriterionKind.TASK_NAME),
            ("name_like", "Rev%", CriterionKind.TASK_NAME_LIKE),
            ("description", "d", CriterionKind.TASK_DESCRIPTION),
            ("description_like", "d%", CriterionKind.TASK_DESCRIPTION_LIKE),
            ("priority", 70, CriterionKind.TASK_PRIORITY),
            ("minimum_priority", 10, CriterionKind.TASK_MIN_PRIORITY),
            ("maximum_priority", 90, CriterionKind.TASK_MAX_PRIORITY),
            ("assignee", "kermit", CriterionKind.TASK_ASSIGNEE),
            ("assignee_like", "ker%", CriterionKind.TASK_ASSIGNEE_LIKE),
            ("owner", "gonzo", CriterionKind.TASK_OWNER),
            ("owner_like", "gon%", CriterionKind.TASK_OWNER_LIKE),
            ("candidate_user", "fozzie", CriterionKind.TASK_CANDIDATE_USER),
            ("involved_user", "piggy", CriterionKind.TASK_INVOLVED_USER),
            ("candidate_group", "sales", CriterionKind.TASK_CANDIDATE_GROUP),
            ("process_instance_id", "p1", CriterionKind.PROCESS_INSTANCE_ID),
            ("process_instance_id_with_children", "p1", CriterionKind.PROCESS_INSTANCE_ID_WITH_CHILDREN),
            ("process_instance_business_key", "order-1", CriterionKind.PROCESS_INSTANCE_BUSINESS_KEY),
            ("process_instance_business_key_like", "order-%", CriterionKind.PROCESS_INSTANCE_BUSINESS_KEY_LIKE),
            ("execution_id", "e1", CriterionKind.EXECUTION_ID),
            ("created_on", MOMENT, CriterionKind.TASK_CREATED_ON),
            ("created_before", MOMENT, CriterionKind.TASK_CREATED_BEFORE),
            ("created_after", MOMENT, CriterionKind.TASK_CREATED_AFTER),
            ("task_definition_key", "approve", CriterionKind.TASK_DEFINITION_KEY),
            ("task_definition_key_like", "app%", CriterionKind.TASK_DEFINITION_KEY_LIKE),
            ("due_date", MOMENT, CriterionKind.TASK_DUE_DATE),
            ("due_before", MOMENT, CriterionKind.TASK_DUE_BEFORE),
            ("due_after", MOMENT, CriterionKind.TASK_DUE_AFTER),
            ("process_definition_id", "pd:1", CriterionKind.PROCESS_DEFINITION_ID),
            ("process_definition_key", "order", CriterionKind.PROCESS_DEFINITION_KEY),
            ("process_definition_key_like", "ord%", CriterionKind.PROCESS_DEFINITION_KEY_LIKE),
            ("process_definition_name", "Order", CriterionKind.PROCESS_DEFINITION_NAME),
            ("process_definition_name_like", "Ord%", CriterionKind.PROCESS_DEFINITION_NAME_LIKE),
            ("scope_definition_id", "sd", CriterionKind.SCOPE_DEFINITION_ID),
            ("scope_id", "s1", CriterionKind.SCOPE_ID),
            ("scope_type", "cmmn", CriterionKind.SCOPE_TYPE),
            ("tenant_id", "acme", CriterionKind.TASK_TENANT_ID),
            ("tenant_id_like", "ac%", CriterionKind.TASK_TENANT_ID_LIKE),
            ("candidate_or_assigned", "kermit", CriterionKind.TASK_CANDIDATE_OR_ASSIGNED),
            ("category", "finance", CriterionKind.TASK_CATEGORY),
        ],
    )
    def test_field_maps_to_criterion(self, field, value, kind):
        assert compile_request(**{field: value}) == [Criterion(kind, value)]

    def test_candidate_group_in_is_a_set(self):
        criteria = compile_request(candidate_group_in=["sales", "management", "sales"])
        assert criteria == [
            Criterion(CriterionKind.TASK_CANDIDATE_GROUP_IN, frozenset({"sales", "management"}))
        ]

    def test_empty_string_is_still_a_constraint(self):
        assert compile_request(name="") == [Criterion(CriterionKind.TASK_NAME, "")]

    def test_several_fields_combine(self):
        kinds = {c.kind for c in compile_request(name="Review", assignee="kermit", priority=50)}
        assert kinds == {
            CriterionKind.TASK_NAME,
            CriterionKind.TASK_ASSIGNEE,
            CriterionKind.TASK_PRIORITY,
        }


# ---------------------------------------------------------------------------
# Boolean and tri-state filters
# ---------------------------------------------------------------------------


class TestBooleanFilters:
    def test_empty_request_has_no_constraints(self):
        query = TaskFilterCompiler().compile(TaskQueryRequest())
        assert query.is_unconstrained
        assert not query.include_task_local_variables_flag
        assert not query.include_process_variables_flag

    @pytest.mark.parametrize("value", [True, False])
    def test_unassigned_acts_on_presence(self, value):
        assert compile_request(unassigned=value) == [Criterion(CriterionKind.TASK_UNASSIGNED)]

    def test_active_true(self):
        assert compile_request(active=True) == [Criterion(CriterionKind.ACTIVE)]

    def test_active_false_means_suspended(self):
        assert compile_request(active=False) == [Criterion(CriterionKind.SUSPENDED)]

    @pytest.mark.parametrize(
        "field, kind",
        [
            ("exclude_sub_tasks", CriterionKind.EXCLUDE_SUBTASKS),
            ("without_due_date", CriterionKind.WITHOUT_TASK_DUE_DATE),
            ("without_tenant_id", CriterionKind.TASK_WITHOUT_TENANT_ID),
        ],
    )
    def test_flags_only_act_when_true(self, field, kind):
        assert compile_request(**{field: True}) == [Criterion(kind)]
        assert compile_request(**{field: False}) == []

    def test_include_flags(self):
        query = TaskFilterCompiler().compile(
            TaskQueryRequest(include_task_local_variables=True, include_process_variables=False)
        )
        assert query.include_task_local_variables_flag
        assert not query.include_process_variables_flag
        assert query.is_unconstrained


# ---------------------------------------------------------------------------
# Delegation state
# ---------------------------------------------------------------------------


class TestDelegationState:
    @pytest.mark.parametrize("raw", ["pending", "PENDING"])
    def test_pending(self, raw):
        assert compile_request(delegation_state=raw) == [
            Criterion(CriterionKind.TASK_DELEGATION_STATE, DelegationState.PENDING)
        ]

    def test_resolved(self):
        assert compile_request(delegation_state="Resolved") == [
            Criterion(CriterionKind.TASK_DELEGATION_STATE, DelegationState.RESOLVED)
        ]

    def test_illegal(self):
        with pytest.raises(InvalidArgumentError, match="Illegal value for delegationState: done"):
            compile_request(delegation_state="done")


# ---------------------------------------------------------------------------
# Variables and interception
# ---------------------------------------------------------------------------


class TestVariablesAndInterceptor:
    def test_variable_scopes(self):
        query = TaskFilterCompiler().compile(
            TaskQueryRequest(
                task_variables=[VariablePredicate("amount", "greaterThan", 100)],
                process_instance_variables=[VariablePredicate(None, "equals", "gold")],
            )
        )
        task_vc, process_vc = query.variable_criteria
        assert (task_vc.scope, task_vc.operation, task_vc.name, task_vc.value) == (
            VariableScope.TASK, VariableOperation.GREATER_THAN, "amount", 100,
        )
        assert (process_vc.scope, process_vc.name, process_vc.value) == (
            VariableScope.PROCESS, None, "gold",
        )

    def test_empty_variable_list_adds_nothing(self):
        query = TaskFilterCompiler().compile(TaskQueryRequest(task_variables=[]))
        assert query.is_unconstrained

    def test_invalid_variable_fails_compilation(self):
        with pytest.raises(InvalidArgumentError):
            TaskFilterCompiler().compile(
                TaskQueryRequest(task_variables=[VariablePredicate("a", "like", 3)])
            )

    def test_interceptor_sees_finished_query(self):
        interceptor = RecordingAccessInterceptor()
        request = TaskQueryRequest(name="Review")
        query = TaskFilterCompiler(interceptor).compile(request)
        assert interceptor.queries == [(query, request)]
        assert query.criteria_of(CriterionKind.TASK_NAME)

    def test_interceptor_veto_propagates(self):
        with pytest.raises(UnauthorizedError):
            TaskFilterCompiler(DenyingAccessInterceptor()).compile(TaskQueryRequest())

    def test_interceptor_not_called_on_invalid_request(self):
        interceptor = RecordingAccessInterceptor()
        with pytest.raises(InvalidArgumentError):
            TaskFilterCompiler(interceptor).compile(TaskQueryRequest(delegation_state="x"))
        assert interceptor.calls == 0


class TestCompilationProperties:
    @given(task_query_request_strategy())
    def test_compiling_twice_gives_same_query(self, req):
        compiler = TaskFilterCompiler()
        assert compiler.compile(req) == compiler.compile(req)

    @given(task_query_request_strategy())
    def test_one_criterion_per_text_field(self, req):
        query = TaskFilterCompiler().compile(req)
        text_values = [
            value for name, value in vars(req).items()
            if isinstance(value, str) and name not in ("sort", "order")
        ]
        assert sorted(c.value for c in query.criteria if isinstance(c.value, str)) == sorted(text_values)
