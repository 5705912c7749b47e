# app/blueprints/onboarding/routes.py
from flask import render_template, redirect, url_for, flash, session
from flask_babel import gettext as _
from flask_login import login_required, current_user

from ...services import get_repo
from ...services.errors import JobBoardError
from ...services.gate import evaluate_gate
from ...services.onboarding import OnboardingFlow, Step
from ...security import current_identity
from . import onboarding_bp
from .forms import ProfileForm, CompanyForm

SESSION_KEY = "onboarding"


# -----------------
# Helpers
# -----------------

def _load_flow() -> OnboardingFlow:
    return OnboardingFlow.from_dict(session.get(SESSION_KEY), initial_name=current_user.name)


def _save_flow(flow: OnboardingFlow):
    session[SESSION_KEY] = flow.to_dict()


def _already_onboarded() -> bool:
    return evaluate_gate(get_repo(), current_identity()).authorized


def _render(flow: OnboardingFlow):
    if flow.step is Step.COMPANY:
        form = CompanyForm(formdata=None, company_name=flow.company_name)
        return render_template("onboarding/company.html", form=form, flow=flow)
    form = ProfileForm(formdata=None, name=flow.name)
    return render_template("onboarding/profile.html", form=form, flow=flow)


# -----------------
# Steps
# -----------------

@onboarding_bp.route("/")
@login_required
def start():
    if _already_onboarded():
        return redirect(url_for("employer.dashboard"))
    return _render(_load_flow())


@onboarding_bp.route("/profile", methods=["POST"])
@login_required
def profile():
    if _already_onboarded():
        return redirect(url_for("employer.dashboard"))

    flow = _load_flow()
    form = ProfileForm()
    if form.validate_on_submit():
        try:
            flow.submit_profile(form.name.data)
        except JobBoardError as e:
            flash(str(e), "warning")
    else:
        for errors in form.errors.values():
            flash(errors[0], "warning")
    _save_flow(flow)
    return redirect(url_for("onboarding.start"))


@onboarding_bp.route("/back", methods=["POST"])
@login_required
def back():
    flow = _load_flow()
    flow.back()
    _save_flow(flow)
    return redirect(url_for("onboarding.start"))


@onboarding_bp.route("/company", methods=["POST"])
@login_required
def company():
    if _already_onboarded():
        return redirect(url_for("employer.dashboard"))

    flow = _load_flow()
    if flow.step is not Step.COMPANY:
        return redirect(url_for("onboarding.start"))

    form = CompanyForm()
    if not form.validate_on_submit():
        for errors in form.errors.values():
            flash(errors[0], "warning")
        return redirect(url_for("onboarding.start"))

    try:
        flow.complete(get_repo(), current_identity(), form.company_name.data)
    except JobBoardError as e:
        flash(str(e), "danger")
        _save_flow(flow)
        return redirect(url_for("onboarding.start"))

    session.pop(SESSION_KEY, None)
    flash(_("Welcome aboard! Your company is ready."), "success")
    return redirect(url_for("employer.dashboard"))
