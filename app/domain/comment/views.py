from sqladmin import ModelView
from .models import Comment

class CommentView(ModelView, model=Comment):
    column_list = [
        'id',
        'issue_id',
        'user_id',
        'text',
        'created_at'
    ]
    can_edit = False
