from .session import UserSession
from .api import SudharNayakClient, ApiError
