from sqlalchemy.orm import Session
from app.dependencies import create_access_token
from app.domain.user.models import User, UserRole
from app.domain.user.service import hash_password
from app.domain.issue.models import Issue, IssueCategory, IssueStatus
from app.domain.comment.models import Comment
from typing import Final, Optional
import datetime
import faker

fake = faker.Faker()

DEFAULT_PASSWORD: Final[str] = 'PasswordExample'
PNG_DATA_URI: Final[str] = 'data:image/png;base64,iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=='

def auth_headers(user: User) -> dict:
    return {'Authorization': f'Bearer {create_access_token(user)}'}

def create_test_user(
    session: Session,
    name: Optional[str] = None,
    email: Optional[str] = None,
    role: UserRole = UserRole.CITIZEN,
    password: str = DEFAULT_PASSWORD
) -> User:
    user = User(
        name=name or fake.name(),
        email=(email or fake.unique.email()).lower(),
        hashed_password=hash_password(password),
        role=role
    )

    session.add(user)
    session.commit()
    session.refresh(user)

    return user

def create_test_issue(
    session: Session,
    user_id: int,
    title: Optional[str] = None,
    category: IssueCategory = IssueCategory.OTHER,
    status: IssueStatus = IssueStatus.PENDING,
    created_at: Optional[datetime.datetime] = None,
    **extra
) -> Issue:
    issue = Issue(
        title=title or fake.sentence(nb_words=4).rstrip('.'),
        description=fake.text(max_nb_chars=200),
        category=category,
        status=status,
        created_by_id=user_id,
        **extra
    )
    if created_at is not None:
        issue.created_at = created_at

    session.add(issue)
    session.commit()
    session.refresh(issue)

    return issue

def create_test_comment(session: Session, issue_id: int, user_id: int, text: Optional[str] = None) -> Comment:
    comment = Comment(issue_id=issue_id, user_id=user_id, text=text or fake.sentence())

    session.add(comment)
    session.commit()
    session.refresh(comment)

    return comment

def minutes_ago(minutes: int) -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc) - datetime.timedelta(minutes=minutes)
