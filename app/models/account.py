# app/models/account.py
from werkzeug.security import generate_password_hash, check_password_hash
from flask_login import UserMixin
from ..extensions import db
from .mixins import TimestampMixin, utcnow


class Account(UserMixin, TimestampMixin, db.Model):
    """Sign-in identity. The employer profile (``user`` row) shares its id."""

    __tablename__ = "account"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False, default="")
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255))
    last_login_at = db.Column(db.DateTime)

    # --- Auth helpers ---
    def set_password(self, password: str):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password: str) -> bool:
        if not self.password_hash:
            return False
        return check_password_hash(self.password_hash, password)

    def mark_login(self):
        self.last_login_at = utcnow()
