from flask import Flask
from flask_migrate import Migrate
from dailydiet.extensions import db, cors
from dailydiet.routes import register_routes
from dailydiet.utils.http import register_error_handlers


def create_app(test_config=None):
    app = Flask(__name__)
    app.config.from_object("config.Config")

    # Overrides must land before the engine is bound by init_app
    if test_config:
        app.config.update(test_config)

    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    # Initialize database
    db.init_app(app)

    # Initialize Flask-Migrate
    Migrate(app, db)

    # CORS Configuration (credentials so the session cookie travels)
    cors.init_app(app,
                  origins=app.config["CORS_ORIGINS"],
                  supports_credentials=True,
                  allow_headers=["Content-Type"],
                  methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"])

    register_routes(app)
    register_error_handlers(app)

    return app
