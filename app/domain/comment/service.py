from sqlalchemy.orm import Session, joinedload
from typing import Union
from app.domain.issue.models import Issue
from app.domain.issue.service import is_valid_id
from app.exceptions import NotFound, ValidationError
from . import models, schemas

def issue_exists(db: Session, issue_id: int) -> bool:
    if not is_valid_id(issue_id):
        return False
    return db.query(Issue.id).filter(Issue.id == issue_id).first() is not None

def get_comments_by_issue_id(db: Session, issue_id: int) -> list[models.Comment]:
    if not issue_exists(db, issue_id):
        raise NotFound("Issue not found")

    return db.query(models.Comment)\
             .options(joinedload(models.Comment.author))\
             .filter(models.Comment.issue_id == issue_id)\
             .order_by(models.Comment.created_at.desc(), models.Comment.id.desc())\
             .all()

def create_comment(db: Session, issue_id: int, user_id: int, comment: Union[schemas.CreateComment, dict]) -> models.Comment:
    if isinstance(comment, schemas.CreateComment):
        comment = comment.model_dump()

    if not issue_exists(db, issue_id):
        raise NotFound("Issue not found")

    text = (comment.get('text') or '').strip()
    if not text:
        raise ValidationError("Comment text is required")

    db_comment = models.Comment(issue_id=issue_id, user_id=user_id, text=text)

    db.add(db_comment)
    db.commit()
    db.refresh(db_comment)

    return db_comment
