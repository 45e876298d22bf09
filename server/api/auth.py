# server/api/auth.py

from datetime import datetime
from fastapi import APIRouter, Body, Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel, ConfigDict
from sqlalchemy.orm import Session
from core.auth_service import AuthResult, AuthService
from core.errors import UnauthenticatedError
from core.responses import success
from core.tokens import TokenRegistry
from database import get_db
from models.user import User as UserModel


router = APIRouter(prefix="/api", tags=["Authentication"])

bearer_scheme = HTTPBearer(scheme_name="bearerAuth", bearerFormat="JWT", auto_error=False)


class User(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    created_at: datetime
    updated_at: datetime


def _auth_payload(result: AuthResult) -> dict:
    return {
        "token": result.token,
        "user": User.model_validate(result.user),
    }


# -------------------------------
# Dependencies
# -------------------------------

def get_auth_service(db: Session = Depends(get_db)) -> AuthService:
    return AuthService(db)


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> UserModel:
    if credentials is None or not credentials.credentials:
        raise UnauthenticatedError()
    user = TokenRegistry(db).resolve(credentials.credentials)
    if user is None:
        raise UnauthenticatedError()
    return user


# -------------------------------
# Endpoints
# -------------------------------

@router.post("/register", status_code=status.HTTP_201_CREATED, summary="Register a new user")
def register(data: dict | None = Body(default=None), auth: AuthService = Depends(get_auth_service)):
    result = auth.register(data or {})
    return success("User is created successfully.", _auth_payload(result), status.HTTP_201_CREATED)


@router.post("/login", summary="Login a user")
def login(data: dict | None = Body(default=None), auth: AuthService = Depends(get_auth_service)):
    result = auth.login(data or {})
    return success("User is logged in successfully.", _auth_payload(result))


@router.post("/logout", summary="Logout and revoke the access token")
def logout(current_user: UserModel = Depends(get_current_user), auth: AuthService = Depends(get_auth_service)):
    auth.logout(current_user.id)
    return success("User is logged out successfully")


@router.get("/user", summary="Get the authenticated user")
def read_current_user(current_user: UserModel = Depends(get_current_user)):
    return success("User is retrieved successfully.", User.model_validate(current_user))
