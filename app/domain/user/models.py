from sqlalchemy import Column, Integer, String, DateTime, Enum
from sqlalchemy.orm import relationship
from ..model_base import Base
import datetime
import enum


class UserRole(str, enum.Enum):
    CITIZEN = "citizen"
    ADMIN = "admin"


def utc_now() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(127), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    hashed_password = Column(String, nullable=False)
    role = Column(
        Enum(UserRole, name="user_role", native_enum=False, values_callable=lambda roles: [role.value for role in roles]),
        nullable=False,
        default=UserRole.CITIZEN
    )
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)

    issues = relationship('Issue', back_populates='created_by', cascade='all, delete-orphan')
    comments = relationship('Comment', back_populates='author', cascade='all, delete-orphan')

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    def __str__(self):
        return f'id - {self.id} email - {self.email}'
