"""SQLAlchemy adapter – relational task stores (SQLAlchemy 2.0 async)."""
from taskquery.adapters.sqlalchemy.session import SqlAlchemySessionFactory
from taskquery.adapters.sqlalchemy.store import SqlAlchemyHistoricTaskStore, SqlAlchemyTaskStore
from taskquery.adapters.sqlalchemy.models import Base

__all__ = [
    "Base",
    "SqlAlchemyHistoricTaskStore",
    "SqlAlchemySessionFactory",
    "SqlAlchemyTaskStore",
]
