# server/models/__init__.py

from sqlalchemy.orm import declarative_base


Base = declarative_base()

from .user import User  # noqa: E402
from .content import Content  # noqa: E402
from .share_link import ShareLink  # noqa: E402
