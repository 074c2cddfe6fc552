"""
User model for database.
"""
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func

from smartpark.database import Base


class User(Base):
    """Staff account allowed to operate the system."""

    __tablename__ = "users"

    id = Column("UserID", Integer, primary_key=True, index=True)
    username = Column("Username", String(50), unique=True, nullable=False, index=True)
    # bcrypt hash, never the plaintext
    password = Column("Password", String(255), nullable=False)
    full_name = Column("FullName", String(100), nullable=False)
    created_at = Column("CreatedAt", DateTime(timezone=True), server_default=func.now())
