# server/core/security.py

import hashlib
import os
from datetime import datetime, timezone
from dotenv import load_dotenv
from jose import JWTError, jwt
from passlib.context import CryptContext
from core.errors import InvalidInputError


load_dotenv()


SECRET_KEY = os.getenv("JWT_SECRET_KEY", "dev-secret-change-me")
ALGORITHM = "HS256"
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "12"))

# bcrypt only looks at the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


# -------------------------------
# Password hashing
# -------------------------------

class PasswordHasher:
    """
    One-way password hashing backed by passlib's bcrypt handler.
    Salting and the adaptive cost factor are handled by bcrypt itself.
    """

    def __init__(self, rounds: int = BCRYPT_ROUNDS):
        self.rounds = rounds
        self.context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)

    def hash(self, plaintext: str) -> str:
        if not isinstance(plaintext, str) or not plaintext:
            raise InvalidInputError("Password must be a non-empty string")
        if len(plaintext.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise InvalidInputError(f"Password must not exceed {MAX_PASSWORD_BYTES} bytes")
        return self.context.hash(plaintext)

    def verify(self, plaintext: str, digest: str) -> bool:
        if not isinstance(plaintext, str) or not isinstance(digest, str):
            return False
        # bcrypt would compare only the first 72 bytes; no stored digest covers a longer password
        if len(plaintext.encode("utf-8")) > MAX_PASSWORD_BYTES:
            return False
        try:
            return self.context.verify(plaintext, digest)
        except (ValueError, TypeError):
            # unknown or malformed digest
            return False


# -------------------------------
# Bearer token encoding
# -------------------------------

def create_token(user_id: int, token_id: str) -> str:
    claims = {
        "sub": str(user_id),
        "jti": token_id,
        "iat": int(datetime.now(timezone.utc).timestamp()),
    }
    return jwt.encode(claims, SECRET_KEY, algorithm=ALGORITHM)


def decode_token(token: str) -> dict | None:
    try:
        return jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError:
        return None


def digest_token(token: str) -> str:
    return hashlib.sha256(token.encode("utf-8")).hexdigest()
