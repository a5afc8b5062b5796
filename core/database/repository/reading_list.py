"""Reading-list repository using SQLModel with dependency injection."""

from typing import Any

from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlmodel import Session, col, select

from core.database.repository.base import BaseRepository
from core.log import get_logger
from core.models.rows import ReadingListEntry
from core.types import BookState
from core.utils import get_current_timestamp

logger = get_logger(__name__)


class ReadingListRepository(BaseRepository[ReadingListEntry]):
    """Repository for ReadingListEntry model operations."""

    def __init__(self, db: Session) -> None:
        """Initialize reading-list repository."""
        super().__init__(ReadingListEntry, db)

    def update(self, obj: ReadingListEntry) -> ReadingListEntry:
        obj.updated_at = get_current_timestamp()
        return super().update(obj)

    def get_entry(self, user_id: int, book_id: str) -> ReadingListEntry | None:
        """Get the entry for a (user, book) pair.

        Args:
            user_id: User ID
            book_id: Catalog volume ID

        Returns:
            ReadingListEntry if found, None otherwise
        """
        statement = select(ReadingListEntry).where(
            (ReadingListEntry.user_id == user_id)
            & (ReadingListEntry.book_id == book_id)
        )
        result = self.db.exec(statement)
        return result.first()

    def get_user_entries(self, user_id: int) -> list[ReadingListEntry]:
        """Get all entries of a user in insertion order."""
        statement = (
            select(ReadingListEntry)
            .where(ReadingListEntry.user_id == user_id)
            .order_by(col(ReadingListEntry.entry_id))
        )
        result = self.db.exec(statement)
        return list(result.all())

    def upsert_entry(
        self,
        user_id: int,
        book_id: str,
        book_state: BookState,
        total_pages: int,
        book: dict[str, Any],
    ) -> ReadingListEntry:
        """Insert an entry, or only change its state if the pair already exists.

        A single statement keyed on (user_id, book_id), so two concurrent adds
        of the same book cannot create duplicates. Progress and the cached
        payload of an existing entry are left untouched.

        Args:
            user_id: User ID
            book_id: Catalog volume ID
            book_state: Requested reading state
            total_pages: Page count from the catalog
            book: Catalog payload to cache

        Returns:
            The stored entry
        """
        now = get_current_timestamp()
        statement = sqlite_insert(ReadingListEntry).values(
            user_id=user_id,
            book_id=book_id,
            book_state=book_state,
            current_page=None,
            total_pages=total_pages,
            book=book,
            created_at=now,
            updated_at=now,
        )
        statement = statement.on_conflict_do_update(
            index_elements=["user_id", "book_id"],
            set_={
                "book_state": statement.excluded.book_state,
                "updated_at": statement.excluded.updated_at,
            },
        )

        try:
            self.db.execute(statement)
            self.db.commit()
        except Exception as exc:
            self.db.rollback()
            logger.error(f"Failed to upsert entry ({user_id}, {book_id}): {exc}")
            raise

        entry = self.get_entry(user_id, book_id)
        if entry is None:
            raise RuntimeError(f"Upserted entry ({user_id}, {book_id}) is missing")

        logger.debug(f"Upserted {entry.model_dump()}")
        return entry
