"""User repository using SQLModel with dependency injection."""

from sqlmodel import Session, select

from core.database.repository.base import BaseRepository
from core.log import get_logger
from core.models.rows import User

logger = get_logger(__name__)


class UserRepository(BaseRepository[User]):
    """User repository using SQLModel with dependency injection."""

    def __init__(self, db: Session) -> None:
        """Initialize user repository."""
        super().__init__(User, db)

    def get_by_email(self, email: str) -> User | None:
        """Get user by email.

        Args:
            email: Normalized user email

        Returns:
            User if found, None otherwise
        """
        statement = select(User).where(User.email == email)
        result = self.db.exec(statement)
        return result.first()

    def create_user(self, name: str | None, email: str, password_hash: str) -> User:
        """Create a user.

        Raises:
            sqlalchemy.exc.IntegrityError: If the email is already registered
        """
        user = User(name=name, email=email, password_hash=password_hash)
        return self.create(user)
