from autohaven.infra.db.models.base import Base
from autohaven.infra.db.models.car import CarRow
from autohaven.infra.db.models.favorite import FavoriteRow
from autohaven.infra.db.models.message import MessageRow
from autohaven.infra.db.models.review import ReviewRow
from autohaven.infra.db.models.user import UserRow

__all__ = ["Base", "CarRow", "FavoriteRow", "MessageRow", "ReviewRow", "UserRow"]
