"""Acting user resolution.

There is no authentication: the client names the acting user in the
``X-User-Id`` and ``X-User-Name`` headers and is trusted.
"""

from fastapi import Header
from pydantic import BaseModel

from breakloop.interface.error import MissingIdentityError


class Actor(BaseModel):
    """User on whose behalf a request runs."""

    user_id: str
    user_name: str


async def get_actor(
    x_user_id: str | None = Header(default=None),
    x_user_name: str | None = Header(default=None),
) -> Actor:
    """Read the acting user from request headers.

    The display name falls back to the user id.

    Raises:
        MissingIdentityError: If ``X-User-Id`` is missing or blank
    """
    if not x_user_id or not x_user_id.strip():
        raise MissingIdentityError()
    user_id = x_user_id.strip()
    return Actor(user_id=user_id, user_name=(x_user_name or user_id).strip())
