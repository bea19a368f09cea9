from typing import Annotated, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from app.config import API_PREFIX
from app.dependencies import (
    get_db, authenticate, authorize_admin, DefaultResponseModel, DefaultErrorModel,
    Responses, CreateExampleResponse, CreateAuthResponses, Example
)
from app.domain.issue import schemas, service
from app.domain.user.models import User
from app.internal import cloudinary

router = APIRouter(
    prefix=f'{API_PREFIX}/issues',
    tags=['Issues']
)

def IssueNotFoundResponse():
    return CreateExampleResponse(
        code=status.HTTP_404_NOT_FOUND,
        description="Not Found",
        examples=[
            Example(
                name="IssueNotFound",
                summary="Issue not found",
                description="The issue with the given ID does not exist.",
                value=DefaultErrorModel(message="Issue not found")
            )
        ]
    )

@router.post(
    '',
    status_code=status.HTTP_201_CREATED,
    responses=Responses(
        CreateAuthResponses(),
        CreateExampleResponse(
            code=status.HTTP_400_BAD_REQUEST,
            description="Bad Request",
            examples=[
                Example(name="MissingTitle", summary="Missing title", value=DefaultErrorModel(message="title: Field required")),
                Example(name="InvalidImage", summary="Invalid image", value=DefaultErrorModel(message="Invalid file type. Please upload JPG, PNG, GIF, or WebP images.")),
            ]
        ),
        CreateExampleResponse(
            code=status.HTTP_502_BAD_GATEWAY,
            description="Bad Gateway",
            examples=[
                Example(name="UploadFailed", summary="Image upload failed", value=DefaultErrorModel(message="Failed to upload image. Please try again.")),
            ]
        )
    )
)
async def create_issue(
    issue: schemas.CreateIssue,
    user_id: Annotated[int, Depends(authenticate)],
    db: Annotated[Session, Depends(get_db)]
) -> schemas.ResponseIssue:
    # Data URIs stay as they are until an image host is configured
    if cloudinary.is_data_uri(issue.image_url):
        cloudinary.validate_data_uri(issue.image_url)
        if cloudinary.is_configured():
            issue.image_url = await cloudinary.upload_image(issue.image_url)

    db_issue = service.create_issue(db=db, issue=issue, user_id=user_id)

    return service.get_issue_by_id(db=db, issue_id=db_issue.id)

@router.get('', status_code=status.HTTP_200_OK)
async def get_issues(
    db: Annotated[Session, Depends(get_db)],
    category: Optional[str] = Query(None, description='Road, Garbage, Water, Electricity or Other'),
    status: Optional[str] = Query(None, description='Pending, In Progress or Resolved')
) -> list[schemas.ResponseIssue]:
    return service.get_issues(db=db, category=category, status=status)

@router.get(
    '/my-issues',
    status_code=status.HTTP_200_OK,
    responses=CreateAuthResponses()
)
async def get_my_issues(
    user_id: Annotated[int, Depends(authenticate)],
    db: Annotated[Session, Depends(get_db)]
) -> list[schemas.ResponseIssue]:
    return service.get_issues_by_user_id(db=db, user_id=user_id)

@router.get(
    '/{issue_id}',
    status_code=status.HTTP_200_OK,
    responses=Responses(IssueNotFoundResponse())
)
async def get_issue_by_id(issue_id: int, db: Annotated[Session, Depends(get_db)]) -> schemas.ResponseIssue:
    return service.get_issue_by_id(db=db, issue_id=issue_id)

@router.put(
    '/{issue_id}',
    status_code=status.HTTP_200_OK,
    responses=Responses(
        CreateAuthResponses(admin=True),
        IssueNotFoundResponse()
    )
)
async def update_issue_status(
    issue_id: int,
    admin: Annotated[User, Depends(authorize_admin)],
    db: Annotated[Session, Depends(get_db)],
    body: Optional[schemas.UpdateIssueStatus] = None
) -> schemas.ResponseIssue:
    # No body leaves the status as it is
    return service.update_issue_status(db=db, issue_id=issue_id, status=body.status if body else None)

@router.delete(
    '/{issue_id}',
    status_code=status.HTTP_200_OK,
    responses=Responses(
        CreateAuthResponses(admin=True),
        IssueNotFoundResponse(),
        CreateExampleResponse(
            code=status.HTTP_200_OK,
            description="OK",
            examples=[
                Example(name="IssueRemoved", summary="Issue removed", value=DefaultResponseModel(message="Issue removed"))
            ]
        )
    )
)
async def delete_issue(
    issue_id: int,
    admin: Annotated[User, Depends(authorize_admin)],
    db: Annotated[Session, Depends(get_db)]
) -> DefaultResponseModel:
    service.delete_issue(db=db, issue_id=issue_id)

    return DefaultResponseModel(message="Issue removed")
