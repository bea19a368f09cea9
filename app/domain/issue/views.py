from sqladmin import ModelView
from .models import Issue

class IssueView(ModelView, model=Issue):
    column_list = [
        Issue.id,
        Issue.title,
        Issue.category,
        Issue.status,
        Issue.location_address,
        Issue.created_by,
        Issue.created_at
    ]
    form_columns = [
        Issue.title,
        Issue.description,
        Issue.image_url,
        Issue.category,
        Issue.status,
        Issue.location_address,
        Issue.location_lat,
        Issue.location_lng
    ]
    column_searchable_list = [Issue.title]
    column_sortable_list = [Issue.id, Issue.created_at, Issue.status]
