import os
from flask import Blueprint, abort, current_app, redirect, request, send_from_directory
from werkzeug.security import safe_join

views_bp = Blueprint("views", __name__)

# Static web bundle; directories redirect to a trailing slash, then serve their index.html
@views_bp.get("/web/", defaults={"path": ""})
@views_bp.get("/web/<path:path>")
def web_bundle(path: str):
    root = os.path.abspath(current_app.config["WEB_ROOT"])
    target = safe_join(root, path)
    if target is None:
        abort(404)
    if os.path.isdir(target):
        if path and not path.endswith("/"):
            return redirect(request.path + "/", code=307)
        path = path + "index.html"
    return send_from_directory(root, path)
