from sqladmin import Admin
from sqladmin.authentication import AuthenticationBackend
from starlette.requests import Request
from app.config import SECRET_KEY
from app.database import engine, SessionLocal
from app.domain.user.views import UserView
from app.domain.issue.views import IssueView
from app.domain.comment.views import CommentView
from app.domain.user.service import get_user, get_user_by_email_and_password

class AdminAuth(AuthenticationBackend):
    """Only stored users holding the admin role can open the panel."""

    async def login(self, request: Request) -> bool:
        form = await request.form()

        with SessionLocal() as db:
            user = get_user_by_email_and_password(db, str(form.get('username', '')), str(form.get('password', '')))
            if user is None or not user.is_admin:
                return False

            request.session.update({"user_id": user.id})

        return True

    async def logout(self, request: Request) -> bool:
        request.session.clear()
        return True

    async def authenticate(self, request: Request) -> bool:
        user_id = request.session.get("user_id")
        if user_id is None:
            return False

        with SessionLocal() as db:
            user = get_user(db, user_id)
            return user is not None and user.is_admin

def create_admin(app):
    authentication_backend = AdminAuth(secret_key=SECRET_KEY)
    admin = Admin(app=app, engine=engine, authentication_backend=authentication_backend, title="SudharNayak Admin")

    admin.add_view(UserView)
    admin.add_view(IssueView)
    admin.add_view(CommentView)

    return admin
