from pydantic import constr
from datetime import datetime
from app.domain.user.schemas import CamelModel, UserInfo

class BaseComment(CamelModel):
    text: constr(strip_whitespace=True, min_length=1, max_length=2000)

class CreateComment(BaseComment):
    pass

class ResponseComment(BaseComment):
    id: int
    issue_id: int
    user_id: int
    author: UserInfo
    created_at: datetime
