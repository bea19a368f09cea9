from typing import Annotated
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.config import API_PREFIX
from app.dependencies import get_db, authenticate, DefaultErrorModel, Responses, CreateExampleResponse, CreateAuthResponses, Example
from app.domain.comment import schemas, service

router = APIRouter(
    prefix=f'{API_PREFIX}/comments',
    tags=['Comments']
)

def IssueNotFoundResponse():
    return CreateExampleResponse(
        code=status.HTTP_404_NOT_FOUND,
        description='Not Found',
        examples=[
            Example(
                name='IssueNotFound',
                summary='Issue not found',
                description='The issue with the given ID does not exist.',
                value=DefaultErrorModel(message='Issue not found')
            )
        ]
    )

@router.get(
    '/{issue_id}',
    status_code=status.HTTP_200_OK,
    responses=Responses(IssueNotFoundResponse())
)
async def get_comments_by_issue_id(issue_id: int, db: Annotated[Session, Depends(get_db)]) -> list[schemas.ResponseComment]:
    return service.get_comments_by_issue_id(db=db, issue_id=issue_id)

@router.post(
    '/{issue_id}',
    status_code=status.HTTP_201_CREATED,
    responses=Responses(
        CreateAuthResponses(),
        IssueNotFoundResponse()
    )
)
async def create_comment_by_issue_id(
    comment: schemas.CreateComment,
    issue_id: int,
    user_id: Annotated[int, Depends(authenticate)],
    db: Annotated[Session, Depends(get_db)]
) -> schemas.ResponseComment:
    return service.create_comment(db=db, issue_id=issue_id, user_id=user_id, comment=comment)
