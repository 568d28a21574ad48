from dotenv import load_dotenv
import os

load_dotenv()

class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev")
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///daily_diet.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # All diet routes live under this prefix
    URL_PREFIX = os.getenv("URL_PREFIX", "/diet")

    # Session cookie identifying the browser that owns users/snacks
    SESSION_ID_COOKIE = "sessionId"
    SESSION_MAX_AGE = int(os.getenv("SESSION_MAX_AGE", 60 * 60 * 24 * 7))

    CORS_ORIGINS = [
        origin.strip()
        for origin in os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",")
        if origin.strip()
    ]

    PORT = int(os.getenv("PORT", 3333))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
