# app/services/email_service.py
from flask import current_app, render_template
from flask_mail import Message
from ..extensions import mail
import logging

log = logging.getLogger(__name__)

def send_email(*, to, subject, template, **ctx) -> bool:
    if not to:
        log.warning("send_email: missing recipient")
        return False
    recipients = [to] if isinstance(to, str) else list(to)
    html = render_template(f"email/{template}", **ctx)
    base = template.rsplit(".", 1)[0]
    txt = render_template(f"email/{base}.txt", **ctx)

    sender = current_app.config.get("MAIL_DEFAULT_SENDER") or current_app.config.get("MAIL_USERNAME")
    if not sender:
        log.error("send_email: no sender configured")
        return False

    msg = Message(subject=subject, recipients=recipients, sender=sender)
    msg.body = txt
    msg.html = html

    if current_app.config.get("MAIL_SUPPRESS_SEND"):
        log.info("[MAIL_SUPPRESS_SEND=1] would send: %s | %s", recipients, subject)
        return True

    try:
        mail.send(msg)
    except Exception:
        log.exception("send_email failed: %s | %s", recipients, subject)
        return False
    log.info("Email sent to %s | subject=%s", recipients, subject)
    return True
