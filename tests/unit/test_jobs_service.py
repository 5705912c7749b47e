from datetime import datetime

import pytest

from app.models import JobPost, JobState, JobType
from app.services.errors import ValidationError
from app.services.jobs import JobInput, create_job, delete_job, toggle_status, update_job

NOW = datetime(2025, 5, 1, 9, 30)


@pytest.fixture
def owner(make_account, onboard):
    account_id = make_account()
    return account_id, onboard(account_id)


def _create(repo, owner, **overrides):
    account_id, company_id = owner
    data = dict(title="Backend Engineer", description="Build APIs.", location="Remote", job_type="FULL_TIME")
    data.update(overrides)
    return create_job(repo, company_id, account_id, JobInput(**data))


@pytest.mark.parametrize(
    "field, message",
    [("title", "Job title is required"), ("description", "Job description is required")],
)
def test_blank_required_field_is_rejected_before_any_write(repo, owner, field, message):
    with pytest.raises(ValidationError, match=message):
        _create(repo, owner, **{field: "  \n "})
    assert JobPost.query.count() == 0


def test_invalid_job_type_is_rejected(repo, owner):
    with pytest.raises(ValidationError):
        _create(repo, owner, job_type="INTERNSHIP")


def test_create_trims_and_starts_active(repo, owner):
    account_id, company_id = owner
    job = _create(repo, owner, title="  Data Engineer ", location="   ", job_type="CONTRACT")

    assert job.title == "Data Engineer"
    assert job.location is None
    assert job.job_type is JobType.CONTRACT
    assert (job.company_id, job.created_by_id) == (company_id, account_id)
    assert job.closed_at is None and job.deleted_at is None
    assert job.state is JobState.ACTIVE


def test_new_job_is_not_marked_as_edited(repo, owner):
    job = _create(repo, owner)
    assert job.created_at is not None
    assert job.updated_at == job.created_at


def test_update_overwrites_fields_but_not_lifecycle(repo, owner):
    job = _create(repo, owner)
    toggle_status(repo, job, now=NOW)
    created_at = job.created_at

    update_job(repo, job, JobInput(title="Staff Engineer", description="Lead.", location="Berlin", job_type="PART_TIME"))

    assert (job.title, job.description, job.location, job.job_type) == (
        "Staff Engineer", "Lead.", "Berlin", JobType.PART_TIME)
    assert job.closed_at == NOW
    assert job.created_at == created_at
    assert job.state is JobState.CLOSED


def test_update_validates_too(repo, owner):
    job = _create(repo, owner)
    with pytest.raises(ValidationError):
        update_job(repo, job, JobInput(title="", description="still here"))
    assert repo.get_job(job.id).title == "Backend Engineer"


def test_toggle_twice_returns_to_active(repo, owner):
    job = _create(repo, owner)
    toggle_status(repo, job, now=NOW)
    assert job.state is JobState.CLOSED
    assert job.closed_at == NOW

    toggle_status(repo, job)
    assert job.state is JobState.ACTIVE
    assert job.closed_at is None


def test_toggle_leaves_deleted_jobs_alone(repo, owner):
    job = _create(repo, owner)
    delete_job(repo, job, now=NOW)
    toggle_status(repo, job)
    assert job.state is JobState.DELETED
    assert job.closed_at is None


def test_delete_dominates_closed(repo, owner):
    job = _create(repo, owner)
    toggle_status(repo, job, now=NOW)
    delete_job(repo, job, now=NOW)
    assert job.deleted_at == NOW
    assert job.state is JobState.DELETED
