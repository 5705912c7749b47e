from urllib.parse import urlparse

from flask import render_template, request, redirect, url_for, flash, current_app, session, abort
from flask_babel import gettext as _

from ...services import get_repo
from ...services.listing import JobFilters, search_open_jobs

from . import main_bp


@main_bp.route("/")
def index():
    repo = get_repo()
    latest = repo.open_jobs()[: current_app.config.get("JOBS_PER_PAGE_PREVIEW", 5)]
    return render_template("home.html", jobs=latest)


@main_bp.route("/jobs")
def jobs():
    filters = JobFilters.from_args(request.args)
    jobs, all_jobs, facets = search_open_jobs(get_repo(), filters)

    def filter_url(f: JobFilters):
        return url_for("main.jobs", **f.to_args())

    return render_template(
        "main/jobs.html",
        jobs=jobs,
        total=len(all_jobs),
        facets=facets,
        filters=filters,
        filter_url=filter_url,
    )


@main_bp.route("/jobs/<int:job_id>")
def job_detail(job_id):
    job = get_repo().get_open_job(job_id)
    if job is None:
        abort(404)
    return render_template("main/job_detail.html", job=job)


def _safe_redirect(default):
    ref = request.referrer
    if ref:
        u = urlparse(ref)
        if not u.netloc or u.netloc == request.host:  # same-origin only
            return ref
    return url_for(default)


@main_bp.route("/i18n/set", methods=["POST"], endpoint="set_language")
def set_language():
    lang = (request.form.get("lang") or "en").lower()
    supported = set(current_app.config.get("LANGUAGES", ["en"]))
    if lang not in supported:
        flash(_("Unsupported language."), "warning")
        return redirect(_safe_redirect("main.index"))

    session["lang"] = lang
    current_app.logger.info("[i18n] lang set -> %s", lang)
    flash(_("Language updated."), "success")
    return redirect(_safe_redirect("main.index"))
