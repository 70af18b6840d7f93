import logging
from flask import Blueprint, current_app, jsonify, request
from .errors import MissingField, SessionError, UnsupportedBody
from .ids import SessionId, decode
from .store import SessionStore

logger = logging.getLogger("sessiond")
auth_bp = Blueprint("auth", __name__)

# Store of the running app (created in create_app)
def current_store() -> SessionStore:
    return current_app.extensions["session_store"]

# Required request field, or MissingField with the given status
def require_field(values, name: str, status_code: int = 400) -> str:
    value = values.get(name)
    if value is None:
        raise MissingField(name, status_code)
    return value

# Decode a client-supplied id; malformed ids never reach the store
def parse_session_id(value: str) -> SessionId:
    try:
        return decode(value)
    except SessionError:
        logger.info(f"session_id_malformed value={value!r}")
        raise

@auth_bp.post("/authenticate")
def do_authenticate():
    if request.mimetype != "application/x-www-form-urlencoded":
        raise UnsupportedBody()

    raw_sid = require_field(request.form, "session_id", 422)
    user = require_field(request.form, "user", 422)
    # Accepted for API compatibility; there is no credential store to check it against
    require_field(request.form, "password", 422)

    sid = parse_session_id(raw_sid)
    session = current_store().lookup(sid)
    session.authenticate(user, raw_sid)

    logger.info(f"authenticate_ok sid={raw_sid} user={user!r}")
    return jsonify({"success": f"session {raw_sid} authenticated succesfully"})
