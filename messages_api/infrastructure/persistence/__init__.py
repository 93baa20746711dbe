from .repositories_sqlalchemy import SQLAlchemyMessageRepository

__all__ = ["SQLAlchemyMessageRepository"]
