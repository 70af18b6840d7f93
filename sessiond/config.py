import os

class Config:
    # Listening address
    HOST = os.environ.get("HOST", "0.0.0.0")
    PORT = int(os.environ.get("PORT", "3000"))

    # Static web bundle, served under /web
    WEB_ROOT = os.environ.get("WEB_ROOT", "web/build")

    # Cross-origin policy
    CORS_ALLOW_ORIGIN = os.environ.get("CORS_ALLOW_ORIGIN", "*")

    # Sessions
    SESSION_DESCRIPTION = os.environ.get("SESSION_DESCRIPTION", "Some session...")
    ID_GENERATION_ATTEMPTS = int(os.environ.get("ID_GENERATION_ATTEMPTS", "3"))

    LOG_PATH = os.environ.get("LOG_PATH", "logs/app.log")
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
