from typing import Annotated
from fastapi import APIRouter, Depends, Body, status
from sqlalchemy.orm import Session
from app.config import API_PREFIX
from app.dependencies import (
    get_db, get_current_user, create_access_token, Responses, CreateExampleResponse,
    CreateAuthResponses, Example, DefaultErrorModel
)
from app.domain.user import schemas, service
from app.domain.user.models import User
from app.exceptions import Unauthorized

router = APIRouter(
    prefix=f"{API_PREFIX}/auth",
    tags=["Auth"],
    responses={500: {'description': 'Internal Server Error'}},
)

def to_auth_user(user: User) -> schemas.AuthUser:
    return schemas.AuthUser(
        id=user.id,
        name=user.name,
        email=user.email,
        role=user.role,
        token=create_access_token(user)
    )

@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    responses=Responses(
        CreateExampleResponse(
            code=status.HTTP_400_BAD_REQUEST,
            description="Bad Request",
            examples=[
                Example(name="PasswordTooShort", summary="Password too short", value=DefaultErrorModel(message="Password must be at least 6 characters")),
                Example(name="UserExists", summary="Email already registered", value=DefaultErrorModel(message="User already exists")),
            ]
        )
    )
)
async def register_user(
    body: Annotated[schemas.UserCreate, Body()],
    db: Session = Depends(get_db)
) -> schemas.AuthUser:
    user = service.create_user(db, body)

    return to_auth_user(user)

@router.post(
    "/login",
    status_code=status.HTTP_200_OK,
    responses=Responses(
        CreateExampleResponse(
            code=status.HTTP_401_UNAUTHORIZED,
            description="Unauthorized",
            examples=[
                Example(name="InvalidCredentials", summary="Invalid credentials", value=DefaultErrorModel(message="Invalid email or password")),
            ]
        )
    )
)
async def login(
    body: Annotated[schemas.UserLogin, Body()],
    db: Session = Depends(get_db)
) -> schemas.AuthUser:
    if not (user := service.get_user_by_email_and_password(db, body.email, body.password)):
        raise Unauthorized("Invalid email or password")

    return to_auth_user(user)

@router.get(
    "/me",
    status_code=status.HTTP_200_OK,
    responses=CreateAuthResponses()
)
async def get_me(
    user: Annotated[User, Depends(get_current_user)]
) -> schemas.UserProfile:
    return user
