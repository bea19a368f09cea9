# Every model has to be registered on Base.metadata before the mappers are configured
from .user import models as user_models
from .issue import models as issue_models
from .comment import models as comment_models
