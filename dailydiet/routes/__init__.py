from .home_routes import home_bp, health_bp
from .user_routes import user_bp
from .snack_routes import snack_bp
from .relationship_routes import relationship_bp

def register_routes(app):
    prefix = app.config.get("URL_PREFIX", "/diet").rstrip("/")

    app.register_blueprint(home_bp)
    app.register_blueprint(health_bp, url_prefix=prefix)
    app.register_blueprint(user_bp, url_prefix=f"{prefix}/users")
    app.register_blueprint(snack_bp, url_prefix=f"{prefix}/snack")
    app.register_blueprint(relationship_bp, url_prefix=f"{prefix}/relship")
