from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm

from vlogsite.api import deps
from vlogsite.core.security import create_access_token, verify_admin_credentials
from vlogsite.schemas.token import AdminOut, Token

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=Token)
def login(form_data: OAuth2PasswordRequestForm = Depends()) -> Token:
    if not verify_admin_credentials(form_data.username, form_data.password):
        logger.warning("failed admin login for %r", form_data.username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password.",
            headers={"WWW-Authenticate": "Bearer"},
        )

    access_token = create_access_token(subject=form_data.username)
    return Token(access_token=access_token, token_type="bearer")


@router.get("/me", response_model=AdminOut)
def read_me(current_admin: AdminOut = Depends(deps.get_current_admin)) -> AdminOut:
    return current_admin
