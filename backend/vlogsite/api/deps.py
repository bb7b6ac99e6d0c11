from __future__ import annotations

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer

from vlogsite.core.config import settings
from vlogsite.core.security import InvalidTokenError, decode_access_token
from vlogsite.schemas.result import SubmissionResult
from vlogsite.schemas.token import AdminOut

oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{settings.API_V1_STR}/auth/login")


def get_current_admin(token: str = Depends(oauth2_scheme)) -> AdminOut:
    try:
        username = decode_access_token(token)
    except InvalidTokenError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return AdminOut(username=username)


def submission_status(result: SubmissionResult) -> int:
    if result.success:
        return status.HTTP_201_CREATED
    if result.issues:
        return status.HTTP_422_UNPROCESSABLE_ENTITY
    return status.HTTP_503_SERVICE_UNAVAILABLE
