from flask import Flask
from certifyme.config import config_map
from certifyme import extensions
from certifyme.errors import register_error_handlers
from certifyme.logging_config import configure_logging
import os


def create_app(env: str = None) -> Flask:
    app = Flask(__name__)

    env = env or os.getenv("FLASK_ENV", "development")
    app.config.from_object(config_map.get(env, config_map["default"]))

    configure_logging(app.config["LOG_LEVEL"])

    # Init extensions
    extensions.db.init_app(app)
    extensions.migrate.init_app(app, extensions.db)
    extensions.jwt.init_app(app)

    register_error_handlers(app)

    with app.app_context():
        # Import models so Flask-Migrate can detect them
        from certifyme.db.models import User, Quiz, Question, Result  # noqa: F401

        # Register blueprints
        from certifyme.api.auth import auth_bp
        from certifyme.api.quizzes import quizzes_bp
        from certifyme.api.results import results_bp
        from certifyme.api.dashboard import dashboard_bp
        app.register_blueprint(auth_bp)
        app.register_blueprint(quizzes_bp)
        app.register_blueprint(results_bp)
        app.register_blueprint(dashboard_bp)

        if app.config.get("CREATE_TABLES"):
            extensions.db.create_all()

    return app
