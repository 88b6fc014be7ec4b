"""Signup / login endpoints: thin HTTP layer.

Business logic lives in :mod:`app.services.auth`.  Unlike the resource
routers, failures here are answered with the same ``{success, message}`` body
as successes, so this router maps domain exceptions to responses itself.
"""

from __future__ import annotations

from collections.abc import Callable

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import AppException, ConflictError, UnauthorizedError, ValidationError
from app.db.base import get_db
from app.schemas.auth import AuthResult, Credentials
from app.services.auth import CredentialService


def _failure(exc: AppException, status_code: int | None = None) -> JSONResponse:
    body = AuthResult(success=False, message=exc.message)
    return JSONResponse(
        status_code=status_code or exc.status_code,
        content=body.model_dump(by_alias=True),
    )


class CredentialRoute(APIRoute):
    """Answers unparseable signup/login bodies in the ``{success, message}`` shape.

    A malformed login is just another failed login (401); a malformed signup
    is a 400.
    """

    def get_route_handler(self) -> Callable:
        handler = super().get_route_handler()

        async def route_handler(request: Request) -> Response:
            try:
                return await handler(request)
            except RequestValidationError:
                if self.name == "login":
                    return _failure(UnauthorizedError("Invalid username or password"))
                return _failure(ValidationError("Username and password are required"))

        return route_handler


router = APIRouter(tags=["Auth"], route_class=CredentialRoute)


@router.post(
    "/signup",
    response_model=AuthResult,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": AuthResult}},
)
async def signup(body: Credentials | None = None, session: AsyncSession = Depends(get_db)):
    try:
        await CredentialService(session).register(body or Credentials())
    except ConflictError as exc:
        # duplicate usernames are reported as a plain 400
        return _failure(exc, status.HTTP_400_BAD_REQUEST)
    except AppException as exc:
        return _failure(exc)
    return AuthResult(success=True, message="User created successfully")


@router.post(
    "/login",
    response_model=AuthResult,
    responses={401: {"model": AuthResult}},
)
async def login(body: Credentials | None = None, session: AsyncSession = Depends(get_db)):
    try:
        await CredentialService(session).verify(body or Credentials())
    except AppException as exc:
        return _failure(exc)
    return AuthResult(success=True, message="Login successful")
