from typing import Annotated, Optional, Literal, Any
from fastapi import Depends
from fastapi.exceptions import RequestValidationError
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from pydantic import BaseModel
from app.database import SessionLocal
from app.config import ACCESS_TOKEN_EXPIRE_TIME, SECRET_KEY, ENCRYPTION_ALGORITHM
from app.exceptions import Unauthorized, Forbidden
from app.domain.user.models import User
from app.domain.user.service import get_user
import jwt
import datetime


class DefaultResponseModel(BaseModel):
    """Used for type hinting and creating examples"""
    message: str

class DefaultErrorModel(BaseModel):
    """Used for creating examples"""
    message: str

class Example(BaseModel):
    """
    Used for making example response in CreateExampleResponse function
    """
    name: str
    summary: str | None = None
    description: str | None = None
    value: dict | BaseModel

def CreateExampleResponse(
    *,
    code: int,
    description: str = '',
    content_type: Literal['application/json', 'text/plain'] = 'application/json',
    examples: list[Example] = [Example(name="Example", value=DefaultResponseModel(message="example"))]
) -> dict[int, dict[str, Any]]:
    """
    Allows for quick docs building

    Pydantic models can be used as value for example

    Raises `AttributeError` when amount of examples is `<1`

    Usage:
    ```python
    @router.get(
        "/issues/{issue_id}",
        responses={
            **CreateExampleResponse(
                code=404,
                description="Not Found",
                examples=[
                    Example(name="IssueNotFound", summary="Issue not found", value=DefaultErrorModel(message="Issue not found"))
                ]
            ),
        }
    )
    ```
    """

    if len(examples) < 1:
        raise AttributeError(name="You need to provide atleast one example")

    return {
        code: {
            "description": description,
            "content": {
                content_type: {
                    "examples": {
                        example.name: {
                            "summary": example.summary,
                            "description": example.description,
                            "value": example.value.model_dump() if isinstance(example.value, BaseModel) else example.value
                        }
                        for example in examples
                    }
                }
            }
        }
    }

def Responses(
    *ExampleResponses: dict[int, dict[str, Any]]
) -> dict[int, dict[str, Any]]:
    """
    Merges the example responses for fastapi endpoint, examples sharing a
    status code and content type end up under the same response

    **Usage**:
    ```python
    @router.put(
        "/issues/{issue_id}",
        responses=Responses(
            CreateAuthResponses(),
            CreateExampleResponse(...),
        )
    )
    ```
    """

    output = {}

    for example in ExampleResponses:
        for code, response in example.items():
            if code not in output:
                output[code] = {
                    "description": response["description"],
                    "content": {content_type: {"examples": dict(body["examples"])} for content_type, body in response["content"].items()}
                }
                continue

            for content_type, body in response["content"].items():
                merged = output[code]["content"].setdefault(content_type, {"examples": {}})
                merged["examples"].update(body["examples"])

    return output

def CreateAuthResponses(admin: bool = False) -> dict[int, dict[str, Any]]:
    responses = Responses(
        CreateExampleResponse(
            code=401,
            description='Unauthorized',
            examples=[
                Example(name="NoToken", summary="Missing token", description="Authorization header is missing", value=DefaultErrorModel(message="Not authorized, no token")),
                Example(name="InvalidToken", summary="Invalid token", description="Token is malformed, expired or belongs to a removed account", value=DefaultErrorModel(message="Not authorized, token failed")),
            ]
        )
    )
    if admin:
        responses.update(CreateExampleResponse(
            code=403,
            description='Forbidden',
            examples=[
                Example(name="NotAdmin", summary="Not an admin", description="Only administrators are allowed to do this", value=DefaultErrorModel(message="Not authorized as an admin")),
            ]
        ))
    return responses

def format_validation_error(error: RequestValidationError) -> str:
    """
    Turns pydantic errors into one short sentence, e.g. `title: Field required`
    """

    messages = []
    for detail in error.errors():
        location = [str(part) for part in detail.get("loc", ()) if part not in ("body", "query", "path")]
        field = ".".join(location)
        messages.append(f'{field}: {detail.get("msg")}' if field else detail.get("msg", "Invalid data"))

    return "; ".join(messages) or "Invalid data"


def get_db():
    """
    Function responsible for giving access to database
    """

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

class AccessToken(BaseModel):
    user_id: int
    role: str | None = None
    token_type: str
    type: str

bearer_scheme = HTTPBearer(auto_error=False, description="Token returned by /auth/login or /auth/register")

def create_token(
    item: dict[str, Any],
    expires_in: Optional[datetime.timedelta] = None
) -> str:
    item.update({
        "token_type": "Bearer",
        "exp": datetime.datetime.now(datetime.timezone.utc) + (expires_in or datetime.timedelta(minutes=ACCESS_TOKEN_EXPIRE_TIME))
    })
    return jwt.encode(item, SECRET_KEY, algorithm=ENCRYPTION_ALGORITHM)

def create_access_token(user: User) -> str:
    return create_token({
        "user_id": user.id,
        "role": user.role.value,
        "type": "access"
    })

def retrieve_access_token(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)]
) -> AccessToken:

    if credentials is None:
        raise Unauthorized('Not authorized, no token')

    try:
        decoded_access_token = jwt.decode(credentials.credentials, SECRET_KEY, algorithms=[ENCRYPTION_ALGORITHM])
    except jwt.PyJWTError:
        raise Unauthorized('Not authorized, token failed')

    if decoded_access_token.get("type") != "access" or decoded_access_token.get("user_id") is None:
        raise Unauthorized('Not authorized, token failed')

    return AccessToken(
        user_id=decoded_access_token.get("user_id"),
        role=decoded_access_token.get("role"),
        type=decoded_access_token.get("type"),
        token_type=decoded_access_token.get("token_type")
    )

def get_current_user(
    access_token: Annotated[AccessToken, Depends(retrieve_access_token)],
    db: Session = Depends(get_db)
) -> User:

    if not (user := get_user(db, access_token.user_id)):
        raise Unauthorized('Not authorized, token failed')

    return user

def authenticate(
    user: Annotated[User, Depends(get_current_user)]
) -> int:
    return user.id

def authorize_admin(
    user: Annotated[User, Depends(get_current_user)]
) -> User:
    """
    Role is read from the stored user, not from the token, so demoted
    accounts lose access immediately.
    """

    if not user.is_admin:
        raise Forbidden('Not authorized as an admin')

    return user
