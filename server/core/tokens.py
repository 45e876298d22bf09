# server/core/tokens.py

import hmac
import logging
import uuid
from sqlalchemy.orm import Session
from core.errors import UnknownUserError
from core.security import create_token, decode_token, digest_token
from models.user import AccessToken, User


logger = logging.getLogger(__name__)


class TokenRegistry:
    """
    Issues, resolves and revokes bearer tokens.

    The secret returned by `issue` is never persisted; the registry keeps
    only its sha256 digest.
    """

    def __init__(self, db: Session):
        self.db = db

    def issue(self, user_id: int, name: str = "") -> tuple[str, str]:
        if self.db.get(User, user_id) is None:
            raise UnknownUserError(user_id)

        token_id = uuid.uuid4().hex
        secret = create_token(user_id, token_id)
        self.db.add(AccessToken(
            id=token_id,
            user_id=user_id,
            name=name,
            token_hash=digest_token(secret),
        ))
        self.db.commit()
        logger.debug("Issued token %s for user %s", token_id, user_id)
        return token_id, secret

    def resolve(self, secret: str) -> User | None:
        """Returns the owner of a live token, or None for anything else."""
        claims = decode_token(secret)
        if not claims or "jti" not in claims or "sub" not in claims:
            return None

        record = self.db.get(AccessToken, claims["jti"])
        if record is None:
            return None
        if not hmac.compare_digest(record.token_hash, digest_token(secret)):
            return None
        if str(record.user_id) != str(claims["sub"]):
            return None
        return record.user

    def revoke_all(self, user_id: int) -> int:
        deleted = (
            self.db.query(AccessToken)
            .filter(AccessToken.user_id == user_id)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return deleted

    def revoke_one(self, token_id: str) -> bool:
        deleted = (
            self.db.query(AccessToken)
            .filter(AccessToken.id == token_id)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return deleted > 0
