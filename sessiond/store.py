import threading
import logging
from contextlib import contextmanager
from typing import Callable, Dict, Optional, Tuple

from .config import Config
from .errors import AlreadyAuthenticated, EntropyUnavailable, SessionNotFound
from .ids import SessionId, encode, generate

logger = logging.getLogger("sessiond")


# Any number of readers or one writer; waiting writers hold off new readers
class RWLock:
    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def read(self):
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if not self._readers:
                    self._cond.notify_all()

    @contextmanager
    def write(self):
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


class Session:
    def __init__(self, description: str = Config.SESSION_DESCRIPTION):
        self.lock = RWLock()
        self.user: Optional[str] = None
        self.description: str = description
        self.authenticated: bool = False

    # One-way transition; a second call fails and leaves the user untouched
    def authenticate(self, user: str, sid: str) -> None:
        with self.lock.write():
            if self.authenticated:
                raise AlreadyAuthenticated(sid)
            self.authenticated = True
            self.user = user

    def to_public(self):
        with self.lock.read():
            return {
                "user": self.user,
                "description": self.description,
                "authenticated": self.authenticated,
            }


# Map lock covers membership only; session locks are taken after lookup() returns
class SessionStore:
    def __init__(self, generate_id: Callable[[], SessionId] = generate, attempts: int = 3,
                 description: str = Config.SESSION_DESCRIPTION):
        self._lock = RWLock()
        self._sessions: Dict[SessionId, Session] = {}
        self._generate_id = generate_id
        self._attempts = max(1, attempts)
        self._description = description

    def create(self) -> Tuple[SessionId, Session]:
        session = Session(self._description)
        with self._lock.write():
            for attempt in range(1, self._attempts + 1):
                sid = self._generate_id()
                if sid not in self._sessions:
                    self._sessions[sid] = session
                    return sid, session
                logger.warning(f"session_id_collision sid={encode(sid)} attempt={attempt}")
        raise EntropyUnavailable(f"{self._attempts} colliding ids in a row")

    def lookup(self, sid: SessionId) -> Session:
        with self._lock.read():
            session = self._sessions.get(sid)
        if session is None:
            raise SessionNotFound(encode(sid))
        return session

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._sessions)
