"""
Tests for forms, submissions and workflow definitions.

Run with: pytest tests/test_forms.py -v
"""

import pytest

from workhub.application.commands.forms import (
    CreateFormCommand,
    CreateFormHandler,
    DeleteFormCommand,
    DeleteFormHandler,
    SetFormActiveCommand,
    SetFormActiveHandler,
    SubmitFormCommand,
    SubmitFormHandler,
    UpdateFormCommand,
    UpdateFormHandler,
    UpdateSubmissionStatusCommand,
    UpdateSubmissionStatusHandler,
)
from workhub.application.commands.workflows import (
    CreateWorkflowCommand,
    CreateWorkflowHandler,
    UpdateWorkflowCommand,
    UpdateWorkflowHandler,
)
from workhub.application.queries.forms import ListSubmissionsHandler, ListSubmissionsQuery
from workhub.domain.entities.form import Form, FormField, FormSubmission, SubmissionStatus
from workhub.domain.entities.workflow import Workflow, WorkflowStep
from workhub.domain.exceptions import (
    DomainValidationError,
    EntityAlreadyExistsError,
    EntityNotFoundError,
    InvalidStateError,
)
from workhub.domain.value_objects.page import PageRequest

FIELDS = (
    FormField(name="email", type="email", label="Email", required=True),
    FormField(name="comment", type="textarea", label="Comment"),
)


@pytest.fixture()
def form(repos):
    return repos.forms.add(Form.create(name="Feedback", fields=list(FIELDS)))


@pytest.mark.anyio
class TestForms:
    async def test_field_names_must_be_unique(self, repos):
        fields = (FormField(name="a", type="text", label="A"), FormField(name="a", type="text", label="B"))
        with pytest.raises(DomainValidationError):
            await CreateFormHandler(repos.forms).execute(CreateFormCommand(name="Dup", fields=fields))

    async def test_form_needs_a_field(self, repos):
        with pytest.raises(DomainValidationError):
            await CreateFormHandler(repos.forms).execute(CreateFormCommand(name="Empty", fields=()))

    async def test_duplicate_name_is_rejected(self, repos, form):
        with pytest.raises(EntityAlreadyExistsError):
            await CreateFormHandler(repos.forms).execute(
                CreateFormCommand(name="Feedback", fields=FIELDS)
            )

    async def test_update_bumps_version_but_activation_does_not(self, repos, form):
        updated = await UpdateFormHandler(repos.forms).execute(
            UpdateFormCommand(form_id=form.id, description="Tell us", modified_by="u1")
        )
        assert updated.version == 2
        assert updated.last_modified_by == "u1"

        toggled = await SetFormActiveHandler(repos.forms).execute(
            SetFormActiveCommand(form_id=form.id, active=False)
        )
        assert toggled.version == 2
        assert not toggled.active

    async def test_form_used_by_workflow_cannot_be_deleted(self, repos, form):
        repos.workflows.add(
            Workflow.create(name="Triage", form_id=form.id, steps=[WorkflowStep(order=1, type="review")])
        )
        handler = DeleteFormHandler(repos.forms, repos.form_submissions, repos.workflows)

        with pytest.raises(InvalidStateError):
            await handler.execute(DeleteFormCommand(form_id=form.id))

    async def test_delete_removes_submissions(self, repos, form):
        repos.form_submissions.add(
            FormSubmission.submit(form_id=form.id, user_id="u1", data={"email": "a@b.co"})
        )
        handler = DeleteFormHandler(repos.forms, repos.form_submissions, repos.workflows)

        assert await handler.execute(DeleteFormCommand(form_id=form.id))

        assert repos.form_submissions.items == {}


@pytest.mark.anyio
class TestSubmissions:
    @pytest.mark.parametrize("data", [{}, {"email": "  "}, {"comment": "hi"}])
    async def test_required_fields_must_have_values(self, repos, form, data):
        with pytest.raises(DomainValidationError):
            await SubmitFormHandler(repos.forms, repos.form_submissions).execute(
                SubmitFormCommand(form_id=form.id, user_id="u1", data=data)
            )

    async def test_inactive_form_refuses_submissions(self, repos, form):
        repos.forms.items[form.id].active = False
        with pytest.raises(InvalidStateError):
            await SubmitFormHandler(repos.forms, repos.form_submissions).execute(
                SubmitFormCommand(form_id=form.id, user_id="u1", data={"email": "a@b.co"})
            )

    async def test_terminal_status_stamps_processed_at(self, repos, form):
        submission = await SubmitFormHandler(repos.forms, repos.form_submissions).execute(
            SubmitFormCommand(form_id=form.id, user_id="u1", data={"email": "a@b.co"})
        )
        assert submission.status == SubmissionStatus.SUBMITTED
        handler = UpdateSubmissionStatusHandler(repos.form_submissions)

        processing = await handler.execute(
            UpdateSubmissionStatusCommand(submission.id, SubmissionStatus.PROCESSING)
        )
        assert processing.processed_at is None

        done = await handler.execute(
            UpdateSubmissionStatusCommand(submission.id, SubmissionStatus.COMPLETED)
        )
        assert done.processed_at is not None

    async def test_listing_needs_form_or_user(self, repos):
        with pytest.raises(DomainValidationError):
            await ListSubmissionsHandler(repos.forms, repos.form_submissions).execute(
                ListSubmissionsQuery(page=PageRequest())
            )


@pytest.mark.anyio
class TestWorkflows:
    async def test_new_workflow_starts_inactive(self, repos, form):
        workflow = await CreateWorkflowHandler(repos.workflows, repos.forms).execute(
            CreateWorkflowCommand(
                name="Triage", form_id=form.id, steps=(WorkflowStep(order=1, type="review"),)
            )
        )
        assert not workflow.active

    async def test_unknown_form_is_not_found(self, repos):
        with pytest.raises(EntityNotFoundError):
            await CreateWorkflowHandler(repos.workflows, repos.forms).execute(
                CreateWorkflowCommand(
                    name="Triage", form_id="missing", steps=(WorkflowStep(order=1, type="review"),)
                )
            )

    async def test_step_orders_must_be_unique(self, repos, form):
        steps = (WorkflowStep(order=1, type="review"), WorkflowStep(order=1, type="email"))
        with pytest.raises(DomainValidationError):
            await CreateWorkflowHandler(repos.workflows, repos.forms).execute(
                CreateWorkflowCommand(name="Triage", form_id=form.id, steps=steps)
            )

    async def test_update_keeps_steps_ordered(self, repos, form):
        workflow = repos.workflows.add(
            Workflow.create(name="Triage", form_id=form.id, steps=[WorkflowStep(order=1, type="a")])
        )

        updated = await UpdateWorkflowHandler(repos.workflows, repos.forms).execute(
            UpdateWorkflowCommand(
                workflow_id=workflow.id,
                steps=(WorkflowStep(order=3, type="c"), WorkflowStep(order=2, type="b")),
            )
        )

        assert [step.order for step in updated.steps] == [2, 3]


class TestFormsApi:
    def test_submit_and_moderate(self, client, member, manager):
        res = client.post(
            "/api/v1/forms",
            headers=manager.headers,
            json={
                "name": "Survey",
                "fields": [{"name": "rating", "type": "number", "label": "Rating", "required": True}],
            },
        )
        assert res.status_code == 201
        form_id = res.json()["data"]["id"]

        res = client.post(
            f"/api/v1/forms/{form_id}/submissions", headers=member.headers, json={"data": {}}
        )
        assert res.status_code == 400

        res = client.post(
            f"/api/v1/forms/{form_id}/submissions",
            headers=member.headers,
            json={"data": {"rating": 5}},
        )
        assert res.status_code == 201
        submission_id = res.json()["data"]["id"]

        res = client.get("/api/v1/forms/submissions/mine", headers=member.headers)
        assert res.json()["total_elements"] == 1

        res = client.patch(
            f"/api/v1/forms/submissions/{submission_id}/status",
            headers=manager.headers,
            json={"status": "REJECTED"},
        )
        assert res.json()["data"]["processed_at"] is not None

    def test_form_creation_requires_manager(self, client, member):
        res = client.post(
            "/api/v1/forms",
            headers=member.headers,
            json={"name": "Survey", "fields": [{"name": "a", "type": "text", "label": "A"}]},
        )
        assert res.status_code == 403

    def test_workflow_activation(self, client, repos, manager, form):
        res = client.post(
            "/api/v1/workflows",
            headers=manager.headers,
            json={"name": "Triage", "form_id": form.id, "steps": [{"order": 1, "type": "review"}]},
        )
        workflow_id = res.json()["data"]["id"]
        assert res.json()["data"]["active"] is False

        res = client.patch(
            f"/api/v1/workflows/{workflow_id}/active", headers=manager.headers, json={"active": True}
        )
        assert res.json()["data"]["active"] is True

        res = client.get(f"/api/v1/forms/{form.id}/workflows", headers=manager.headers)
        assert [w["name"] for w in res.json()["data"]] == ["Triage"]
