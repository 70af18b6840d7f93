import os
import logging
from typing import Any, Mapping, Optional
from flask import Flask
from flask_cors import CORS
from .config import Config
from .auth import auth_bp
from .api import api_bp
from .views import views_bp
from .store import SessionStore

# Logging setup; a later app replaces the previous file handler instead of stacking one
def _setup_logging(log_path: str, level: str):
    logger = logging.getLogger("sessiond")
    logger.setLevel(level)
    for h in list(logger.handlers):
        if isinstance(h, logging.FileHandler):
            logger.removeHandler(h)
            h.close()
    fh = logging.FileHandler(log_path, encoding="utf-8")
    fmt = logging.Formatter("%(asctime)s %(levelname)s %(message)s")
    fh.setFormatter(fmt)
    logger.addHandler(fh)
    return logger

# Flask app creation
def create_app(overrides: Optional[Mapping[str, Any]] = None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if overrides:
        app.config.update(overrides)

    # Logging
    os.makedirs(os.path.dirname(app.config["LOG_PATH"]) or ".", exist_ok=True)
    logger = _setup_logging(app.config["LOG_PATH"], app.config["LOG_LEVEL"])

    # One store per app instance, shared by all request threads
    app.extensions["session_store"] = SessionStore(
        attempts=app.config["ID_GENERATION_ATTEMPTS"],
        description=app.config["SESSION_DESCRIPTION"],
    )

    app.register_blueprint(auth_bp, url_prefix="/api")
    app.register_blueprint(api_bp, url_prefix="/api")
    app.register_blueprint(views_bp)

    # Cross-origin policy for every route
    CORS(app, origins=app.config["CORS_ALLOW_ORIGIN"], methods=["GET", "POST"])

    logger.info(f"app_created web_root={app.config['WEB_ROOT']} cors_origin={app.config['CORS_ALLOW_ORIGIN']}")
    return app
