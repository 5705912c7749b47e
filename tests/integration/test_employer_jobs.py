import pytest

from app.extensions import db
from app.models import JobPost, JobType, JobState


def _job_form(**overrides):
    data = {
        "title": "Backend Engineer",
        "location": "Remote",
        "job_type": "FULL_TIME",
        "description": "Build and run our Python services.",
    }
    data.update(overrides)
    return data


def test_create_job(client, app, employer):
    _, company_id = employer
    resp = client.post("/employer/jobs/new", data=_job_form(location="  "), follow_redirects=True)
    html = resp.get_data(as_text=True)
    assert resp.request.path == "/employer/jobs"
    assert "Job post created." in html
    assert "Active (1)" in html
    assert "Closed (0)" in html

    # never edited, so no "Updated" line on the card
    assert "Updated" not in html

    with app.app_context():
        job = JobPost.query.one()
        assert job.company_id == company_id
        assert job.location is None
        assert job.job_type is JobType.FULL_TIME
        assert job.state is JobState.ACTIVE

    # new post shows up on the public board
    assert "Backend Engineer" in client.get("/jobs").get_data(as_text=True)


@pytest.mark.parametrize("field, message", [
    ("title", "Job title is required"),
    ("description", "Job description is required"),
])
def test_create_job_requires_title_and_description(client, app, employer, field, message):
    resp = client.post("/employer/jobs/new", data=_job_form(**{field: "   "}))
    assert resp.status_code == 200
    assert message in resp.get_data(as_text=True)
    with app.app_context():
        assert JobPost.query.count() == 0


def test_edit_prefills_and_updates(client, app, employer, make_job):
    account_id, company_id = employer
    job_id = make_job(company_id, account_id, location=None)

    html = client.get(f"/employer/jobs/{job_id}/edit").get_data(as_text=True)
    assert 'value="Backend Engineer"' in html
    assert "Update Job" in html

    resp = client.post(f"/employer/jobs/{job_id}/edit",
                       data=_job_form(title="Staff Engineer", job_type="CONTRACT", location="Lisbon"))
    assert resp.status_code == 302

    with app.app_context():
        job = db.session.get(JobPost, job_id)
        assert (job.title, job.job_type, job.location) == ("Staff Engineer", JobType.CONTRACT, "Lisbon")
        assert job.closed_at is None and job.deleted_at is None


def test_toggle_closes_and_reopens(client, app, employer, make_job):
    account_id, company_id = employer
    job_id = make_job(company_id, account_id, title="Toggle Me")

    resp = client.post(f"/employer/jobs/{job_id}/toggle", follow_redirects=True)
    html = resp.get_data(as_text=True)
    assert "Job closed." in html
    assert "Active (0)" in html and "Closed (1)" in html
    assert "Toggle Me" not in client.get("/jobs").get_data(as_text=True)
    assert client.get(f"/jobs/{job_id}").status_code == 404

    html = client.get("/employer/jobs?tab=closed").get_data(as_text=True)
    assert "Toggle Me" in html
    assert "Reopen Job" in html

    resp = client.post(f"/employer/jobs/{job_id}/toggle", follow_redirects=True)
    assert "Job reopened." in resp.get_data(as_text=True)
    with app.app_context():
        assert db.session.get(JobPost, job_id).closed_at is None


def test_delete_moves_job_to_deleted_tab(client, app, employer, make_job):
    account_id, company_id = employer
    job_id = make_job(company_id, account_id, title="Remove Me")

    resp = client.post(f"/employer/jobs/{job_id}/delete", follow_redirects=True)
    html = resp.get_data(as_text=True)
    assert "Job deleted." in html
    assert "Active (0)" in html and "Deleted (1)" in html

    html = client.get("/employer/jobs?tab=deleted").get_data(as_text=True)
    assert "Remove Me" in html
    assert "Close Job" not in html
    assert "Reopen Job" not in html

    # a deleted job stays deleted
    resp = client.post(f"/employer/jobs/{job_id}/toggle", follow_redirects=True)
    assert "Deleted job posts cannot be reopened." in resp.get_data(as_text=True)
    with app.app_context():
        job = db.session.get(JobPost, job_id)
        assert job.state is JobState.DELETED
        assert job.closed_at is None


def test_toggle_and_delete_are_post_only(client, employer, make_job):
    account_id, company_id = employer
    job_id = make_job(company_id, account_id)
    assert client.get(f"/employer/jobs/{job_id}/toggle").status_code == 405
    assert client.get(f"/employer/jobs/{job_id}/delete").status_code == 405


def test_other_companies_jobs_are_forbidden(client, app, employer, make_account, onboard, make_job):
    rival = make_account("rival@example.com", name="Rita Rival")
    rival_company = onboard(rival, name="Rita Rival", company="Rival Inc")
    job_id = make_job(rival_company, rival, title="Not Yours")

    assert client.get(f"/employer/jobs/{job_id}/edit").status_code == 403
    assert client.post(f"/employer/jobs/{job_id}/toggle").status_code == 403
    assert client.post(f"/employer/jobs/{job_id}/delete").status_code == 403
    assert "Not Yours" not in client.get("/employer/jobs").get_data(as_text=True)

    with app.app_context():
        assert db.session.get(JobPost, job_id).state is JobState.ACTIVE


def test_missing_job_is_not_found(client, employer):
    assert client.get("/employer/jobs/999/edit").status_code == 404
    assert client.post("/employer/jobs/999/toggle").status_code == 404


def test_dashboard_counts(client, employer, make_job):
    account_id, company_id = employer
    make_job(company_id, account_id, title="Open One")
    make_job(company_id, account_id, title="Shut One", closed=True)
    html = client.get("/employer/dashboard").get_data(as_text=True)
    assert "Acme Corp" in html
    assert "Active: 1" in html
    assert "Closed: 1" in html
    assert "Open One" in html


def test_unknown_tab_falls_back_to_active(client, employer):
    html = client.get("/employer/jobs?tab=bogus").get_data(as_text=True)
    assert "No active job posts" in html


def test_delete_confirmation_is_a_javascript_string(client, employer, make_job):
    account_id, company_id = employer
    make_job(company_id, account_id)
    html = client.get("/employer/jobs").get_data(as_text=True)
    assert "onsubmit='return confirm(\"Are you sure you want to delete this job post?" in html
