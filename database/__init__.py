"""Database package: ORM models and table setup.

Sessions and engines live in `database.database`; routers get them through
`database.deps`.
"""

from .database import init_db
from . import models

__all__ = ["init_db", "models"]
