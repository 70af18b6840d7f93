from typing import Optional


# Request-scoped failure, rendered as {"error": message}
class SessionError(Exception):
    status_code: int = 400

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class MalformedSessionId(SessionError):
    def __init__(self):
        super().__init__("malformed session id")


class SessionNotFound(SessionError):
    def __init__(self, sid: str):
        super().__init__(f"session {sid} doesn't exist")
        self.sid = sid


class AlreadyAuthenticated(SessionError):
    def __init__(self, sid: str):
        super().__init__(f"session {sid} already authenticated")
        self.sid = sid


class MissingField(SessionError):
    def __init__(self, name: str, status_code: int = 400):
        super().__init__(f"missing field {name}", status_code)
        self.name = name


class UnsupportedBody(SessionError):
    status_code = 415

    def __init__(self):
        super().__init__("expected form-encoded body")


class EntropyUnavailable(SessionError):
    status_code = 500

    def __init__(self, reason: str = ""):
        super().__init__("could not generate session id")
        self.reason = reason
