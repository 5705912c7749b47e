# app/blueprints/employer/routes.py
from flask import render_template, redirect, url_for, request, flash, abort, g, current_app
from flask_babel import gettext as _

from . import employer_bp
from .forms import JobForm
from ...models.job import JobPost, JobState
from ...security import employer_required
from ...services import get_repo
from ...services.errors import JobBoardError
from ...services.jobs import create_job, update_job, toggle_status, delete_job
from ...services.listing import list_company_jobs


# -----------------
# Helpers
# -----------------

def _owned_job(job_id: int) -> JobPost:
    job = get_repo().get_job(job_id)
    if job is None:
        abort(404)
    if job.company_id != g.company.id:
        abort(403)
    return job


def _tab_arg() -> JobState:
    try:
        return JobState((request.args.get("tab") or "active").lower())
    except ValueError:
        return JobState.ACTIVE


def _flash_form_errors(form):
    for errors in form.errors.values():
        flash(errors[0], "warning")


# -----------------
# Dashboard
# -----------------

@employer_bp.route("/dashboard")
@employer_required
def dashboard():
    jobs = list_company_jobs(get_repo(), g.company.id)
    preview = jobs.active[: current_app.config.get("JOBS_PER_PAGE_PREVIEW", 5)]
    return render_template(
        "employer/dashboard.html",
        user=g.employer,
        company=g.company,
        counts=jobs.counts,
        recent=preview,
    )


# -----------------
# Job posts
# -----------------

@employer_bp.route("/jobs")
@employer_required
def jobs_list():
    jobs = list_company_jobs(get_repo(), g.company.id)
    tab = _tab_arg()
    return render_template(
        "employer/jobs.html",
        company=g.company,
        jobs=jobs,
        tab=tab,
        states=list(JobState),
    )


@employer_bp.route("/jobs/new", methods=["GET", "POST"])
@employer_required
def job_new():
    form = JobForm()
    if form.validate_on_submit():
        try:
            create_job(get_repo(), g.company.id, g.employer.id, form.to_input())
        except JobBoardError as e:
            flash(str(e), "danger")
        else:
            flash(_("Job post created."), "success")
            return redirect(url_for("employer.jobs_list"))
    else:
        _flash_form_errors(form)
    return render_template("employer/job_form.html", form=form, job=None, company=g.company)


@employer_bp.route("/jobs/<int:job_id>/edit", methods=["GET", "POST"])
@employer_required
def job_edit(job_id):
    job = _owned_job(job_id)
    form = JobForm.for_job(job) if request.method == "GET" else JobForm()
    if form.validate_on_submit():
        try:
            update_job(get_repo(), job, form.to_input())
        except JobBoardError as e:
            flash(str(e), "danger")
        else:
            flash(_("Job post updated."), "success")
            return redirect(url_for("employer.jobs_list", tab=job.state.value))
    else:
        _flash_form_errors(form)
    return render_template("employer/job_form.html", form=form, job=job, company=g.company)


@employer_bp.route("/jobs/<int:job_id>/toggle", methods=["POST"])
@employer_required
def job_toggle(job_id):
    job = _owned_job(job_id)
    if job.state is JobState.DELETED:
        flash(_("Deleted job posts cannot be reopened."), "warning")
        return redirect(url_for("employer.jobs_list", tab=JobState.DELETED.value))
    try:
        toggle_status(get_repo(), job)
    except JobBoardError as e:
        flash(str(e), "danger")
    else:
        flash(_("Job closed.") if job.state is JobState.CLOSED else _("Job reopened."), "success")
    return redirect(url_for("employer.jobs_list", tab=request.form.get("tab") or "active"))


@employer_bp.route("/jobs/<int:job_id>/delete", methods=["POST"])
@employer_required
def job_delete(job_id):
    job = _owned_job(job_id)
    try:
        delete_job(get_repo(), job)
    except JobBoardError as e:
        flash(str(e), "danger")
    else:
        flash(_("Job deleted."), "success")
    return redirect(url_for("employer.jobs_list", tab=request.form.get("tab") or "active"))
