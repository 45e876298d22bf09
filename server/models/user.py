# server/models/user.py

from datetime import datetime
from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from . import Base


# -------------------------------
# User Model
# -------------------------------

class User(Base):
    """
    Database model for application users.
    The email is the login key and is unique across all users.
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(250), nullable=False)
    email = Column(String(250), unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    created_at = Column(DateTime, default=datetime.now, nullable=False)
    updated_at = Column(DateTime, default=datetime.now, onupdate=datetime.now, nullable=False)

    tokens = relationship("AccessToken", back_populates="user", passive_deletes=True)


# -------------------------------
# Access Token Model
# -------------------------------

class AccessToken(Base):
    """
    A bearer token issued to a user.
    Only the sha256 digest of the secret is stored; the secret is handed
    to the client once, at issuance.
    """
    __tablename__ = "access_tokens"

    id = Column(String(32), primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    name = Column(String(250), nullable=False, default="")
    token_hash = Column(String(64), nullable=False)
    created_at = Column(DateTime, default=datetime.now, nullable=False)

    user = relationship("User", back_populates="tokens")
