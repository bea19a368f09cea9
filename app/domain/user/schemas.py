from pydantic import BaseModel, ConfigDict, EmailStr, constr
from pydantic.alias_generators import to_camel
from .models import UserRole


class CamelModel(BaseModel):
    """Serializes with camelCase keys, accepts both camelCase and snake_case."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class UserInfo(CamelModel):
    id: int
    name: str
    email: str


class UserProfile(UserInfo):
    role: UserRole


class AuthUser(UserProfile):
    token: str


class UserCreate(BaseModel):
    name: constr(strip_whitespace=True, min_length=1, max_length=127)
    email: EmailStr
    password: str


class UserLogin(BaseModel):
    email: EmailStr
    password: str
