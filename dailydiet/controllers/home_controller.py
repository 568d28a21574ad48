from flask import jsonify, current_app
from dailydiet.extensions import db

def home_index():
    prefix = current_app.config.get("URL_PREFIX", "/diet").rstrip("/")
    return jsonify({
        "message": "Daily diet API: log snacks on or off your diet and track your metrics",
        "prefix": prefix,
        "endpoints": [f"{prefix}/users", f"{prefix}/snack", f"{prefix}/relship"],
    })

def health_check():
    db_status = "healthy"
    try:
        db.session.execute(db.text("SELECT 1"))
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Database health check failed: {e}")
        db_status = f"unhealthy: {e}"

    return jsonify({
        "status": "online",
        "database": db_status,
    })
