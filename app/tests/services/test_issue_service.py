from sqlalchemy.orm import Session
from app.domain.issue import service, schemas
from app.domain.issue.models import Issue, IssueCategory, IssueStatus
from app.domain.comment.models import Comment
from app.domain.user.models import User
from app.exceptions import NotFound, ValidationError
from ..utils import create_test_issue, create_test_comment, minutes_ago
import pytest

def test_create_issue_from_schema(session: Session, create_user: User):
    issue = service.create_issue(
        session,
        schemas.CreateIssue(title=' Pothole on 5th ', description='Deep one', category='Road', location={'lat': 18.5, 'lng': 73.8}),
        create_user.id
    )

    assert issue.title == 'Pothole on 5th'
    assert issue.category == IssueCategory.ROAD
    assert issue.status == IssueStatus.PENDING
    assert issue.created_by_id == create_user.id
    assert issue.location == {'address': None, 'lat': 18.5, 'lng': 73.8}

def test_create_issue_from_dict_coerces_category(session: Session, create_user: User):
    issue = service.create_issue(session, {'title': 'title', 'description': 'description', 'category': 'Trees'}, create_user.id)

    assert issue.category == IssueCategory.OTHER
    assert issue.location is None

@pytest.mark.parametrize(
    'issue',
    [
        {'title': '', 'description': 'description'},
        {'title': 'title', 'description': '   '},
        {'description': 'description'},
    ]
)
def test_create_issue_requires_title_and_description(session: Session, create_user: User, issue: dict):
    with pytest.raises(ValidationError):
        service.create_issue(session, issue, create_user.id)

    assert session.query(Issue).count() == 0

def test_create_issue_status_is_always_pending(session: Session, create_user: User):
    issue = service.create_issue(session, {'title': 'title', 'description': 'description', 'status': 'Resolved'}, create_user.id)

    assert issue.status == IssueStatus.PENDING

def test_get_issues_order_and_filters(session: Session, create_user: User):
    old_road = create_test_issue(session, create_user.id, category=IssueCategory.ROAD, created_at=minutes_ago(60))
    new_road = create_test_issue(session, create_user.id, category=IssueCategory.ROAD, created_at=minutes_ago(5))
    water = create_test_issue(session, create_user.id, category=IssueCategory.WATER, status=IssueStatus.RESOLVED, created_at=minutes_ago(30))

    assert service.get_issues(session) == [new_road, water, old_road]
    assert service.get_issues(session, category='Road') == [new_road, old_road]
    assert service.get_issues(session, status=IssueStatus.RESOLVED) == [water]
    assert service.get_issues(session, category='Road', status='Resolved') == []
    assert service.get_issues(session, category='Trees') == []

def test_get_issues_by_user_id(session: Session, create_user: User, create_other_user: User):
    mine = create_test_issue(session, create_user.id)
    create_test_issue(session, create_other_user.id)

    assert service.get_issues_by_user_id(session, create_user.id) == [mine]

def test_get_issue_by_id_missing(session: Session):
    with pytest.raises(NotFound) as e:
        service.get_issue_by_id(session, 42)

    assert e.value.detail == 'Issue not found'

@pytest.mark.parametrize(
    'new_status, expected',
    [
        ('Resolved', IssueStatus.RESOLVED),
        (IssueStatus.IN_PROGRESS, IssueStatus.IN_PROGRESS),
        (None, IssueStatus.PENDING),
        ('', IssueStatus.PENDING),
    ]
)
def test_update_issue_status(session: Session, create_user: User, new_status, expected: IssueStatus):
    issue = create_test_issue(session, create_user.id)

    assert service.update_issue_status(session, issue.id, new_status).status == expected

def test_update_issue_status_invalid(session: Session, create_user: User):
    issue = create_test_issue(session, create_user.id)

    with pytest.raises(ValidationError):
        service.update_issue_status(session, issue.id, 'Closed')

    session.refresh(issue)
    assert issue.status == IssueStatus.PENDING

def test_update_issue_status_missing(session: Session):
    with pytest.raises(NotFound):
        service.update_issue_status(session, 42, 'Resolved')

def test_delete_issue_removes_comments(session: Session, create_user: User):
    issue = create_test_issue(session, create_user.id)
    for _ in range(3):
        create_test_comment(session, issue.id, create_user.id)

    service.delete_issue(session, issue.id)

    assert session.query(Issue).count() == 0
    assert session.query(Comment).count() == 0

def test_delete_issue_missing(session: Session):
    with pytest.raises(NotFound):
        service.delete_issue(session, 42)
