"""Resolution error taxonomy.

Every failure of a resolution is raised as a ``ResolveError`` subclass. The
``kind`` identifies the failure for the front-end, ``str(exc)`` is the
human-readable message.
"""

from __future__ import annotations

from enum import Enum


class ResolveErrorKind(str, Enum):
    NO_MATCH = "no_match"
    BLOCKED = "blocked"
    UNSUPPORTED = "unsupported"
    UPSTREAM_HTTP_ERROR = "upstream_http_error"
    UPSTREAM_DECODE_ERROR = "upstream_decode_error"
    ENTITY_NOT_FOUND = "entity_not_found"
    ENTITY_OFFLINE = "entity_offline"
    TOKEN_DECODE_ERROR = "token_decode_error"


class ResolveError(Exception):
    """Base error for URL resolution."""

    kind: ResolveErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NoMatchError(ResolveError):
    kind = ResolveErrorKind.NO_MATCH

    def __init__(self, message: str = "not found") -> None:
        super().__init__(message)


class BlockedChannelError(ResolveError):
    kind = ResolveErrorKind.BLOCKED

    def __init__(self, channel: str) -> None:
        super().__init__("this channel is not supported")
        self.channel = channel


class UnsupportedChannelError(ResolveError):
    kind = ResolveErrorKind.UNSUPPORTED

    def __init__(self, channel: str) -> None:
        super().__init__("unsupported channel name")
        self.channel = channel


class UpstreamHttpError(ResolveError):
    """Backend answered with a non-200 status, or could not be reached.

    ``status_code`` is None when no response was received at all.
    """

    kind = ResolveErrorKind.UPSTREAM_HTTP_ERROR

    def __init__(self, status_code: int | None, body: str = "") -> None:
        if status_code is None:
            message = "failed to reach Twitch"
        else:
            message = "received non-200 response from Twitch"
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class UpstreamDecodeError(ResolveError):
    kind = ResolveErrorKind.UPSTREAM_DECODE_ERROR

    def __init__(self, body: str = "") -> None:
        super().__init__("received unexpected response from Twitch")
        self.body = body


class EntityNotFoundError(ResolveError):
    kind = ResolveErrorKind.ENTITY_NOT_FOUND


class EntityOfflineError(ResolveError):
    kind = ResolveErrorKind.ENTITY_OFFLINE


class TokenDecodeError(ResolveError):
    kind = ResolveErrorKind.TOKEN_DECODE_ERROR

    def __init__(self, message: str = "could not decode clip access token") -> None:
        super().__init__(message)
