import logging
from flask import Blueprint, jsonify, request
from .auth import current_store, parse_session_id, require_field
from .errors import SessionError
from .ids import encode

logger = logging.getLogger("sessiond")
api_bp = Blueprint("api", __name__)

@api_bp.app_errorhandler(SessionError)
def handle_session_error(e: SessionError):
    if e.status_code >= 500:
        logger.error(f"request_failed path={request.path} status={e.status_code} err={e.message} reason={getattr(e, 'reason', '')}")
    else:
        logger.info(f"request_rejected path={request.path} status={e.status_code} err={e.message}")
    return jsonify({"error": e.message}), e.status_code

@api_bp.post("/new_session")
def new_session():
    store = current_store()
    sid, _ = store.create()
    id_base64 = encode(sid)
    logger.info(f"session_created sid={id_base64} total={len(store)}")
    return jsonify({"id_base64": id_base64})

@api_bp.get("/session_state")
def session_state():
    raw_sid = require_field(request.args, "session_id")
    session = current_store().lookup(parse_session_id(raw_sid))
    return jsonify(session.to_public())

@api_bp.get("/healthz")
def healthz():
    return "ok", 200
