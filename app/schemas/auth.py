"""Signup / login request and acknowledgement schemas."""


from app.schemas.common import APIModel

class Credentials(APIModel):
    username: str | None = None
    password: str | None = None

class AuthResult(APIModel):
    """Body of every /signup and /login response, success or failure."""
    success: bool
    message: str
