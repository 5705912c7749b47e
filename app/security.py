# app/security.py
from functools import wraps

from flask import g, redirect, request, url_for
from flask_login import current_user

from .services import get_repo
from .services.gate import GateStatus, evaluate_gate


def current_identity():
    if current_user.is_authenticated:
        return current_user.id
    return None


def gate_redirect(result):
    """Redirect for a caller the gate did not authorize, else None."""
    if result.status is GateStatus.UNAUTHENTICATED:
        return redirect(url_for("auth.login", next=request.full_path.rstrip("?")))
    if result.status is GateStatus.NEEDS_ONBOARDING:
        return redirect(url_for("onboarding.start"))
    return None


def employer_required(f):
    """Run the session gate; authorized callers get ``g.employer`` and ``g.company``."""

    @wraps(f)
    def decorated_function(*args, **kwargs):
        result = evaluate_gate(get_repo(), current_identity())
        guard = gate_redirect(result)
        if guard is not None:
            return guard
        g.employer = result.user
        g.company = result.company
        return f(*args, **kwargs)

    return decorated_function
