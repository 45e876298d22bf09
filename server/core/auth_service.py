# server/core/auth_service.py

import logging
from dataclasses import dataclass
from functools import lru_cache
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from core.errors import InvalidCredentialsError, InvalidInputError, ValidationError
from core.security import PasswordHasher
from core.tokens import TokenRegistry
from core.validation import LoginRequest, RegisterRequest, parse, validate
from models.user import User


logger = logging.getLogger(__name__)

EMAIL_TAKEN = "The email has already been taken."


@lru_cache(maxsize=None)
def dummy_digest(rounds: int) -> str:
    """A digest to verify against when the email is unknown, computed once per cost factor."""
    return PasswordHasher(rounds=rounds).hash("not-a-real-password")


@dataclass
class AuthResult:
    token: str
    user: User


class AuthService:
    """
    Registration, login and logout over the user table and the token registry.
    """

    def __init__(self, db: Session, hasher: PasswordHasher | None = None, tokens: TokenRegistry | None = None):
        self.db = db
        self.hasher = hasher or PasswordHasher()
        self.tokens = tokens or TokenRegistry(db)

    def register(self, payload: dict) -> AuthResult:
        request, errors = parse(RegisterRequest, payload)
        if "email" not in errors:
            email = request.email if request else payload["email"]
            if self._email_taken(email):
                errors["email"] = [EMAIL_TAKEN]
        if errors:
            raise ValidationError(errors)

        try:
            hashed = self.hasher.hash(request.password)
        except InvalidInputError as e:
            raise ValidationError({"password": [str(e)]})

        user = User(name=request.name, email=request.email, hashed_password=hashed)
        self.db.add(user)
        try:
            self.db.flush()
        except IntegrityError:
            # lost a race with a concurrent registration for the same email
            self.db.rollback()
            raise ValidationError({"email": [EMAIL_TAKEN]})

        _, token = self.tokens.issue(user.id, name=user.email)
        self.db.refresh(user)
        logger.info("Registered user %s", user.id)
        return AuthResult(token=token, user=user)

    def login(self, payload: dict) -> AuthResult:
        request = validate(LoginRequest, payload)

        user = self._find_by_email(request.email)
        if user is None:
            # keep the response time close to that of a wrong password
            self.hasher.verify(request.password, dummy_digest(self.hasher.rounds))
            logger.warning("Failed login attempt")
            raise InvalidCredentialsError()
        if not self.hasher.verify(request.password, user.hashed_password):
            logger.warning("Failed login attempt")
            raise InvalidCredentialsError()

        _, token = self.tokens.issue(user.id, name=user.email)
        logger.info("User %s logged in", user.id)
        return AuthResult(token=token, user=user)

    def logout(self, user_id: int) -> None:
        revoked = self.tokens.revoke_all(user_id)
        logger.info("User %s logged out, %d token(s) revoked", user_id, revoked)

    def _find_by_email(self, email: str) -> User | None:
        return self.db.query(User).filter(func.lower(User.email) == email.lower()).first()

    def _email_taken(self, email: str) -> bool:
        return self._find_by_email(email) is not None
