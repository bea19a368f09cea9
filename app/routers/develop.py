from fastapi import Depends, APIRouter, Query, HTTPException, status
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from faker import Faker
from app.config import API_PREFIX
from app.dependencies import get_db, DefaultResponseModel
from app.domain.model_base import Base
from app.domain.user.service import hash_password
from app.domain.user.models import User
from app.domain.issue.models import Issue, IssueCategory, IssueStatus
from app.domain.comment.models import Comment
import datetime
import random
import logging

logger = logging.getLogger(__name__)

SAMPLE_PASSWORD = 'password'

router = APIRouter(
    prefix=f'{API_PREFIX}/develop',
    tags=['Develop']
)


@router.post("/sample-data", status_code=status.HTTP_201_CREATED)
def seed_data(
    user_amount: int = Query(10, ge=1, le=100, description="Must be between 1 and 100"),
    issue_amount: int = Query(20, ge=1, le=100, description="Must be between 1 and 100"),
    db: Session = Depends(get_db)
) -> DefaultResponseModel:
    fake = Faker()
    hashed_password = hash_password(SAMPLE_PASSWORD)
    try:
        users = [
            User(
                name=fake.name(),
                email=f'{fake.unique.user_name()}@{fake.free_email_domain()}'.lower(),
                hashed_password=hashed_password
            ) for _ in range(user_amount)
        ]

        db.add_all(users)
        db.commit()

        now = datetime.datetime.now(datetime.timezone.utc)
        issues = []
        for _ in range(issue_amount):
            created_at = now - datetime.timedelta(minutes=random.randint(1, 60 * 24 * 30))

            comments = [
                Comment(
                    user_id=random.choice(users).id,
                    text=fake.sentence(nb_words=12),
                    created_at=created_at + datetime.timedelta(minutes=minutes)
                ) for minutes in sorted(random.sample(range(1, 600), random.randint(0, 5)))
            ]

            issue = Issue(
                title=fake.sentence(nb_words=5).rstrip('.'),
                description=fake.text(max_nb_chars=500),
                category=random.choice(list(IssueCategory)),
                status=random.choice(list(IssueStatus)),
                location_address=fake.address().replace('\n', ', '),
                location_lat=float(fake.latitude()),
                location_lng=float(fake.longitude()),
                created_by_id=random.choice(users).id,
                created_at=created_at,
                comments=comments
            )
            issues.append(issue)

        db.add_all(issues)
        db.commit()

        logger.info(f"Seeded {user_amount} users and {issue_amount} issues")
        return DefaultResponseModel(message="Sample data added successfully")

    except SQLAlchemyError as e:
        db.rollback()
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))


@router.delete("/clear-database")
def clear_data(db: Session = Depends(get_db)) -> DefaultResponseModel:
    try:
        # Children first so foreign keys never point at removed rows
        for table in reversed(Base.metadata.sorted_tables):
            db.execute(table.delete())
        db.commit()

        logger.info("All data cleared")
        return DefaultResponseModel(message="All data cleared successfully")

    except SQLAlchemyError as e:
        db.rollback()
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
