"""Base repository with dependency injection pattern."""

from typing import Generic, TypeVar

from sqlmodel import Session, SQLModel, func, select

from core.log import get_logger

logger = get_logger(__name__)

T = TypeVar("T", bound=SQLModel)


class BaseRepository(Generic[T]):
    """Base repository with dependency injection pattern."""

    def __init__(self, model: type[T], db: Session) -> None:
        self.model = model
        self.db = db

    def _save(self, obj: T, action: str) -> T:
        try:
            self.db.add(obj)
            self.db.commit()
            self.db.refresh(obj)
            logger.debug(f"{action} {self.model.__name__}: {obj.model_dump()}")
        except Exception as exc:
            self.db.rollback()
            logger.error(f"Failed to {action.lower()} {self.model.__name__}: {exc}")
            raise

        return obj

    def create(self, obj: T) -> T:
        return self._save(obj, "Created")

    def update(self, obj: T) -> T:
        return self._save(obj, "Updated")

    def get_by_id(self, obj_id: int) -> T | None:
        return self.db.get(self.model, obj_id)

    def count(self) -> int:
        """Count all objects."""
        statement = select(func.count()).select_from(self.model)
        return self.db.exec(statement).one()
