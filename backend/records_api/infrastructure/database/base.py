"""SQLAlchemy ORM base for the records schema."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models; ``metadata`` drives create_all at startup."""

    pass
