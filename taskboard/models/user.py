"""
User model.

An account that owns projects. Emails are stored lowercase.
"""

from typing import List, Optional, TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from taskboard.models.base_model import TimestampedModel

if TYPE_CHECKING:
    from taskboard.models.project import Project


class User(TimestampedModel):
    """
    User table - an authenticated account.
    """
    
    __tablename__ = "users"
    
    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
    )
    
    hashed_password: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    
    name: Mapped[Optional[str]] = mapped_column(
        String(100),
        nullable=True,
    )
    
    # Relationships
    projects: Mapped[List["Project"]] = relationship(
        "Project",
        back_populates="owner",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
