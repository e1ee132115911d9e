# shop_server/models/user.py

from datetime import datetime, timezone
from sqlalchemy import Column, DateTime, Integer, String
from . import Base


def _utcnow():
    return datetime.now(timezone.utc)


# -------------------------------
# User Model
# -------------------------------

class User(Base):
    """
    Database model for application users.
    `password` always holds a bcrypt hash, never the plaintext.
    Email uniqueness is enforced here, not only by the signup check.
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(30), nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    password = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)

    def to_public(self) -> dict:
        return {"id": str(self.id), "username": self.username, "email": self.email}
