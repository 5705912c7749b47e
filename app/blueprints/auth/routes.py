# app/blueprints/auth/routes.py
from datetime import datetime, timezone
from typing import Optional

from flask import render_template, request, redirect, url_for, flash, current_app, session
from flask_babel import gettext as _
from flask_login import login_user, logout_user, login_required, current_user
from itsdangerous import URLSafeTimedSerializer, BadSignature, SignatureExpired
from ...services.email_service import send_email
from ...extensions import db
from ...models.account import Account
from . import auth_bp
from .forms import RegisterForm, LoginForm, ForgotPasswordForm, ResetPasswordForm

# -----------------
# Utilities
# -----------------

def _ts() -> URLSafeTimedSerializer:
    secret_key = current_app.config.get("SECRET_KEY")
    salt = current_app.config.get("SECURITY_PASSWORD_SALT", "pwd-reset")
    return URLSafeTimedSerializer(secret_key=secret_key, salt=salt)


def _issue_reset_token(account_id: int) -> str:
    return _ts().dumps({"uid": account_id, "ts": datetime.now(timezone.utc).isoformat()})


def _verify_reset_token(token: str, max_age: Optional[int] = None) -> Optional[int]:
    if max_age is None:
        max_age = current_app.config.get("PASSWORD_RESET_MAX_AGE", 60 * 60 * 24)
    try:
        data = _ts().loads(token, max_age=max_age)
        return int(data.get("uid"))
    except (BadSignature, SignatureExpired, ValueError, TypeError):
        return None


def _redirect_next(default_endpoint: str):
    nxt = request.args.get("next") or request.form.get("next")
    # local paths only
    if nxt and nxt.startswith("/") and not nxt.startswith("//"):
        return nxt
    return url_for(default_endpoint)


def send_password_reset_email(account: Account, link: str):
    return send_email(
        to=account.email,
        subject=_("Reset your %(app)s password", app=current_app.config.get("APP_NAME", "Job Board")),
        template="password_reset.html",
        account=account,
        link=link,
    )

# -----------------
# Register
# -----------------

@auth_bp.route('/register', methods=['GET', 'POST'])
def register():
    if current_user.is_authenticated:
        return redirect(url_for('employer.dashboard'))

    form = RegisterForm()
    if form.validate_on_submit():
        email = form.email.data.strip().lower()

        # Uniqueness is checked in form validator too, but double check to be safe
        if Account.query.filter_by(email=email).first():
            flash(_('Email is already registered. Try logging in.'), 'warning')
            return redirect(url_for('auth.login'))

        account = Account(name=form.name.data.strip(), email=email)
        account.set_password(form.password.data)
        db.session.add(account)
        db.session.commit()
        current_app.logger.info("account %s registered", account.id)
        flash(_('Account created. You can now log in.'), 'success')
        return redirect(url_for('auth.login'))

    return render_template('auth/register.html', form=form)


# -----------------
# Login / Logout
# -----------------

@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    if current_user.is_authenticated:
        return redirect(url_for('employer.dashboard'))

    form = LoginForm()
    if form.validate_on_submit():
        email = form.email.data.strip().lower()
        account = Account.query.filter_by(email=email).first()
        if not account or not account.check_password(form.password.data):
            flash(_('Invalid email or password.'), 'danger')
            return render_template('auth/login.html', form=form)

        login_user(account, remember=bool(form.remember.data))
        account.mark_login()
        db.session.commit()

        # the dashboard gate sends new accounts on to onboarding
        return redirect(_redirect_next('employer.dashboard'))

    # Preserve next param
    if request.method == 'GET':
        form.next.data = request.args.get('next', '')
    return render_template('auth/login.html', form=form)


@auth_bp.route('/logout')
@login_required
def logout():
    logout_user()
    session.pop('onboarding', None)
    flash(_('You have been logged out.'), 'info')
    return redirect(url_for('auth.login'))


# -----------------
# Forgot / Reset Password
# -----------------

@auth_bp.route('/forgot-password', methods=['GET', 'POST'])
def forgot_password():
    form = ForgotPasswordForm()
    if form.validate_on_submit():
        email = form.email.data.strip().lower()
        account = Account.query.filter_by(email=email).first()
        # mask whether email exists
        if account:
            token = _issue_reset_token(account.id)
            link = url_for('auth.reset_password', token=token, _external=True)
            send_password_reset_email(account, link)
        flash(_('If that email is registered, you will receive a reset link shortly.'), 'info')
        return redirect(url_for('auth.login'))

    return render_template('auth/forgot_password.html', form=form)


@auth_bp.route('/reset-password/<token>', methods=['GET', 'POST'])
def reset_password(token):
    account_id = _verify_reset_token(token)
    if not account_id:
        flash(_('The reset link is invalid or has expired.'), 'danger')
        return redirect(url_for('auth.forgot_password'))

    account = db.get_or_404(Account, account_id)
    form = ResetPasswordForm()
    if form.validate_on_submit():
        account.set_password(form.password.data)
        db.session.commit()
        flash(_('Your password has been reset. Please sign in.'), 'success')
        return redirect(url_for('auth.login'))

    return render_template('auth/reset_password.html', form=form)
