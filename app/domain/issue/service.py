from sqlalchemy.orm import Session, joinedload
from typing import Union, Optional
from app.exceptions import NotFound, ValidationError
from . import models, schemas
import logging

logger = logging.getLogger(__name__)

# Largest id a signed 64 bit INTEGER column can hold
MAX_ID = 2**63 - 1

def is_valid_id(issue_id: int) -> bool:
    return 0 < issue_id <= MAX_ID

def _newest_first(query):
    return query.order_by(models.Issue.created_at.desc(), models.Issue.id.desc())

def _with_creator(db: Session):
    return db.query(models.Issue).options(joinedload(models.Issue.created_by))

def create_issue(db: Session, issue: Union[schemas.CreateIssue, dict], user_id: int) -> models.Issue:
    if isinstance(issue, schemas.CreateIssue):
        issue_dict = issue.model_dump()
    elif isinstance(issue, dict):
        issue_dict = dict(issue)
    else:
        raise ValidationError("Invalid issue format")

    title = (issue_dict.get('title') or '').strip()
    description = (issue_dict.get('description') or '').strip()
    if not title:
        raise ValidationError("Title is required")
    if not description:
        raise ValidationError("Description is required")

    location = issue_dict.get('location')
    if isinstance(location, schemas.Location):
        location = location.model_dump()
    location = location or {}

    db_issue = models.Issue(
        title=title,
        description=description,
        image_url=issue_dict.get('image_url'),
        category=models.IssueCategory.coerce(issue_dict.get('category')),
        status=models.IssueStatus.PENDING,
        location_address=location.get('address'),
        location_lat=location.get('lat'),
        location_lng=location.get('lng'),
        created_by_id=user_id
    )

    db.add(db_issue)
    db.commit()
    db.refresh(db_issue)

    return db_issue

def get_issues(db: Session, category: Optional[str] = None, status: Optional[str] = None) -> list[models.Issue]:
    query = _with_creator(db)

    if category:
        if (db_category := models.IssueCategory.parse(category)) is None:
            return []
        query = query.filter(models.Issue.category == db_category)

    if status:
        if (db_status := models.IssueStatus.parse(status)) is None:
            return []
        query = query.filter(models.Issue.status == db_status)

    return _newest_first(query).all()

def get_issue_by_id(db: Session, issue_id: int) -> models.Issue:
    if not is_valid_id(issue_id):
        raise NotFound("Issue not found")

    db_issue = _with_creator(db).filter(models.Issue.id == issue_id).first()
    if db_issue is None:
        raise NotFound("Issue not found")
    return db_issue

def get_issues_by_user_id(db: Session, user_id: int) -> list[models.Issue]:
    return _newest_first(_with_creator(db).filter(models.Issue.created_by_id == user_id)).all()

def update_issue_status(db: Session, issue_id: int, status: Union[models.IssueStatus, str, None]) -> models.Issue:
    db_issue = get_issue_by_id(db, issue_id)

    if status is None or status == '':
        return db_issue

    if (new_status := models.IssueStatus.parse(status)) is None:
        raise ValidationError(f"Invalid status '{status}'")

    db_issue.status = new_status
    db.commit()
    db.refresh(db_issue)
    logger.info(f"Issue {db_issue.id} status set to {new_status.value}")

    return db_issue

def delete_issue(db: Session, issue_id: int) -> None:
    db_issue = get_issue_by_id(db, issue_id)

    db.delete(db_issue)
    db.commit()
    logger.info(f"Issue {issue_id} removed")
