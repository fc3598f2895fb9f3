"""ORM model for issued session tokens."""

from sqlalchemy import Column, ForeignKey, Integer, LargeBinary

from roster.models.base import Base


class UserSession(Base):
    """A session token (16 little-endian bytes) bound to one user; removed with the user."""

    __tablename__ = "sessions"

    session_token = Column(LargeBinary(16), primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"))
