import re
import base64
import secrets
from dataclasses import dataclass

from .errors import MalformedSessionId, EntropyUnavailable

ID_BYTES = 16

# 16 bytes -> 22 base64 characters, the last one carrying 2 data bits
_ENCODED = re.compile(r"[A-Za-z0-9_-]{21}[AQgw]")


@dataclass(frozen=True, order=True)
class SessionId:
    raw: bytes

    def __post_init__(self):
        if not isinstance(self.raw, bytes) or len(self.raw) != ID_BYTES:
            raise ValueError(f"session id must be {ID_BYTES} bytes")

    def __str__(self) -> str:
        return encode(self)


# Identifier -> URL-safe base64 without padding
def encode(sid: SessionId) -> str:
    return base64.urlsafe_b64encode(sid.raw).rstrip(b"=").decode("ascii")


# URL-safe base64 without padding -> identifier; anything but exactly 16 bytes fails
def decode(value: str) -> SessionId:
    if not isinstance(value, str) or not _ENCODED.fullmatch(value):
        raise MalformedSessionId()
    raw = base64.urlsafe_b64decode(value + "==")
    if len(raw) != ID_BYTES:
        raise MalformedSessionId()
    return SessionId(raw)


# Fresh random identifier from the OS CSPRNG
def generate() -> SessionId:
    try:
        return SessionId(secrets.token_bytes(ID_BYTES))
    except (OSError, NotImplementedError) as e:
        raise EntropyUnavailable(str(e)) from e
