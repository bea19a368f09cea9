from pydantic import constr, field_validator, Field
from datetime import datetime
from typing import Annotated, Optional
from app.domain.user.schemas import CamelModel, UserInfo
from .models import IssueCategory, IssueStatus

# LOCATION
class Location(CamelModel):
    address: Optional[str] = None
    lat: Optional[Annotated[float, Field(ge=-90, le=90)]] = None
    lng: Optional[Annotated[float, Field(ge=-180, le=180)]] = None

    @field_validator('address', 'lat', 'lng', mode='before')
    @classmethod
    def empty_as_missing(cls, value):
        # Forms send '' for parts that were never filled in
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def is_empty(self) -> bool:
        return self.address is None and self.lat is None and self.lng is None

# ISSUE
class BaseIssue(CamelModel):
    title: constr(strip_whitespace=True, min_length=1, max_length=255)
    description: constr(strip_whitespace=True, min_length=1)
    image_url: Optional[str] = None
    category: IssueCategory = IssueCategory.OTHER
    location: Optional[Location] = None

class CreateIssue(BaseIssue):

    @field_validator('category', mode='before')
    @classmethod
    def coerce_category(cls, value):
        return IssueCategory.coerce(value)

    @field_validator('image_url', mode='before')
    @classmethod
    def empty_image_as_missing(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

class UpdateIssueStatus(CamelModel):
    status: Optional[IssueStatus] = None

    @field_validator('status', mode='before')
    @classmethod
    def empty_status_as_missing(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

class ResponseIssue(BaseIssue):
    id: int
    thumbnail_url: Optional[str] = None
    status: IssueStatus
    created_by: UserInfo
    created_at: datetime
