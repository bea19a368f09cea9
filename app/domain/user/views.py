from sqladmin import ModelView
from .models import User

class UserView(ModelView, model=User):
    column_list = [
        'id', 'name', 'email', 'role', 'created_at'
    ]
    form_columns = [
        'name', 'email', 'role'
    ]
    column_searchable_list = ['name', 'email']
