from __future__ import annotations

from dataclasses import dataclass

from fastapi.security import HTTPAuthorizationCredentials


@dataclass(frozen=True)
class RequestUser:
    """
    Identity of the caller.

    The bearer token is the user id itself; there is no credential check.
    A request without a usable bearer token is anonymous.
    """

    id: str | None = None

    @property
    def is_anonymous(self) -> bool:
        return self.id is None


ANONYMOUS = RequestUser()


def request_user_from_credentials(
    credentials: HTTPAuthorizationCredentials | None,
) -> RequestUser:
    if credentials is None or credentials.scheme.lower() != "bearer":
        return ANONYMOUS

    user_id = credentials.credentials.strip()
    if not user_id:
        return ANONYMOUS
    return RequestUser(id=user_id)
