# app/extensions.py
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_login import LoginManager
from flask_wtf import CSRFProtect
from flask_mail import Mail
from flask_babel import Babel, gettext as _, lazy_gettext as _l


db = SQLAlchemy()
migrate = Migrate()
csrf = CSRFProtect()
mail = Mail()
babel = Babel()

# employer pages send anonymous callers to the sign-in form
login_manager = LoginManager()
login_manager.login_view = "auth.login"
login_manager.login_message = "Please sign in to manage your job posts."
login_manager.localize_callback = _
login_manager.login_message_category = "info"
