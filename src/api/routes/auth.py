"""Registration and login endpoints."""

import sqlite3

from fastapi import APIRouter, Depends, HTTPException, status

from api.dependencies import get_db
from api.models.responses import Credentials, UserIdResponse
from services.accounts import AccountError, authenticate_user, register_user

router = APIRouter(prefix="/api")


def account_error(e: AccountError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail={"error": str(e), "code": e.code, "details": []},
    )


@router.post("/register", response_model=UserIdResponse)
def register(body: Credentials, conn: sqlite3.Connection = Depends(get_db)):
    """Create an account and return its id."""
    try:
        user_id = register_user(conn, body.email, body.password)
    except AccountError as e:
        raise account_error(e)
    return UserIdResponse(user_id=user_id)


@router.post("/login", response_model=UserIdResponse)
def login(body: Credentials, conn: sqlite3.Connection = Depends(get_db)):
    """Check credentials and return the account id."""
    try:
        user_id = authenticate_user(conn, body.email, body.password)
    except AccountError as e:
        raise account_error(e)
    return UserIdResponse(user_id=user_id)
