from sqlalchemy import Column, Integer, String, Text, Float, ForeignKey, DateTime, Enum
from sqlalchemy.orm import relationship
from ..model_base import Base
from ..user.models import utc_now
from app.internal.cloudinary import thumbnail_url
import enum


class IssueCategory(str, enum.Enum):
    ROAD = "Road"
    GARBAGE = "Garbage"
    WATER = "Water"
    ELECTRICITY = "Electricity"
    OTHER = "Other"

    @classmethod
    def parse(cls, value):
        """Returns the matching member or None."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None

    @classmethod
    def coerce(cls, value) -> "IssueCategory":
        """Unknown or empty categories silently fall back to Other."""
        return cls.parse(value) or cls.OTHER


class IssueStatus(str, enum.Enum):
    PENDING = "Pending"
    IN_PROGRESS = "In Progress"
    RESOLVED = "Resolved"

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


def enum_values(enumeration) -> list[str]:
    return [member.value for member in enumeration]


class Issue(Base):
    __tablename__ = "issues"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    image_url = Column(Text, nullable=True)
    category = Column(
        Enum(IssueCategory, name="issue_category", native_enum=False, values_callable=enum_values),
        nullable=False,
        default=IssueCategory.OTHER
    )
    status = Column(
        Enum(IssueStatus, name="issue_status", native_enum=False, values_callable=enum_values),
        nullable=False,
        default=IssueStatus.PENDING,
        index=True
    )
    location_address = Column(String(500), nullable=True)
    location_lat = Column(Float, nullable=True)
    location_lng = Column(Float, nullable=True)
    created_by_id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, index=True)

    created_by = relationship('User', back_populates='issues')
    comments = relationship('Comment', back_populates='issue', cascade='all, delete-orphan')

    @property
    def location(self) -> dict | None:
        if self.location_address is None and self.location_lat is None and self.location_lng is None:
            return None
        return {
            "address": self.location_address,
            "lat": self.location_lat,
            "lng": self.location_lng
        }

    @property
    def thumbnail_url(self) -> str | None:
        return thumbnail_url(self.image_url)

    def __repr__(self):
        return f"<Issue(id={self.id}, title={self.title}, category={self.category}, status={self.status})>"
