"""FastAPI dependencies for identity and authentication."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from skillshare.core import container
from skillshare.database import DatabaseSession
from skillshare.domain.identity.entities.user import User
from skillshare.exceptions import CredentialsException, UserNotFoundError
from skillshare.infrastructure.identity.auth.token_service import verify_access_token

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    db: DatabaseSession,
) -> User:
    """
    Get the current authenticated user from the bearer token.

    Args:
        credentials: Authorization header contents
        db: Database session

    Returns:
        User domain entity

    Raises:
        CredentialsException: If the token is missing or invalid, or the user is gone
    """
    if credentials is None:
        raise CredentialsException
    user_id = verify_access_token(credentials.credentials)
    if user_id is None:
        raise CredentialsException
    with container.db.override(db):
        use_case = container.user_profile_use_case()
    try:
        return use_case.get_user(user_id)
    except UserNotFoundError:
        raise CredentialsException from None


CurrentUser = Annotated[User, Depends(get_current_user)]
