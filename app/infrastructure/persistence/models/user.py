"""User and UserProfile ORM models.

Users are global accounts linked 1:1 to a Person; the phone lives on the
person and the display name on the profile.
"""

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import CuidMixin, TimestampMixin
from app.infrastructure.persistence.models.person import Person


class User(CuidMixin, TimestampMixin, Base):
    """User account. Table: app_user. email optional but unique."""

    __tablename__ = "app_user"

    person_id: Mapped[str] = mapped_column(
        String, ForeignKey("person.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    email: Mapped[str | None] = mapped_column(String(255), unique=True, nullable=True)

    person: Mapped[Person] = relationship()
    profile: Mapped["UserProfile"] = relationship(
        back_populates="user", uselist=False
    )


class UserProfile(CuidMixin, TimestampMixin, Base):
    """Display profile of a user. Table: user_profile. One per user."""

    __tablename__ = "user_profile"

    user_id: Mapped[str] = mapped_column(
        String, ForeignKey("app_user.id", ondelete="CASCADE"), nullable=False, unique=True
    )
    first_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    last_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    middle_name: Mapped[str | None] = mapped_column(String(255), nullable=True)

    user: Mapped[User] = relationship(back_populates="profile")
