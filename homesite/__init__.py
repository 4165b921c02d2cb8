"""
homesite/__init__.py
--------------------
Application factory and global extensions.
"""

from flask import Flask
from flask_login import LoginManager

from .config import Config
from .errors import policy_for
from .models import User, db

login = LoginManager()
login.login_view = "auth.sign_in"


def create_app(config_class: type = Config) -> Flask:
    """Create and configure a Flask application instance."""
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Chosen once; an unknown name stops the app from starting
    app.extensions["error_policy"] = policy_for(app.config["ERROR_POLICY"])

    db.init_app(app)
    login.init_app(app)

    @login.user_loader
    def load_user(user_id: str):
        """Return user object from session-stored user_id."""
        return db.session.get(User, int(user_id))

    # ── Register blueprints ─────────────────────────────────────
    from .auth.routes import bp as auth_bp
    app.register_blueprint(auth_bp, url_prefix="/auth")

    @app.route("/healthz")
    def healthz():
        return "ok"

    # Catch-all short-link route lives here, so register it last
    from .main.routes import bp as main_bp
    app.register_blueprint(main_bp)

    with app.app_context():
        db.create_all()

    from .tasks import register_cli_commands
    register_cli_commands(app)

    app.logger.info(
        "homesite app created (error policy %s, link prefix %r)",
        app.config["ERROR_POLICY"],
        app.config["LINK_PREFIX"],
    )
    return app
