"""Credential store: persistence of user identity records."""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, load_only

from taskmanager.errors import ConflictError
from taskmanager.models.user import User


class UserRepository:
    """Repository for user records.

    Users are never cached; every call goes to the database.
    """

    def __init__(self, db: Session):
        self.db = db

    def get_by_email(self, email: str) -> User | None:
        """Get a user by exact (case-sensitive) email, including the password hash."""
        return self.db.query(User).filter(User.email == email).first()

    def get_identity(self, user_id: int) -> User | None:
        """Get a user by id, loading only the non-secret columns."""
        return (
            self.db.query(User)
            .options(load_only(User.id, User.email, User.name, User.is_active))
            .filter(User.id == user_id)
            .first()
        )

    def exists_with_email(self, email: str) -> bool:
        """Check whether a user with this exact email exists."""
        return self.db.query(User.id).filter(User.email == email).first() is not None

    def create(self, email: str, password_hash: str, name: str) -> User:
        """Insert a new user.

        The unique constraint on ``users.email`` is the final arbiter when two
        registrations race; the loser surfaces as a ConflictError.
        """
        user = User(email=email, password_hash=password_hash, name=name)
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise ConflictError("User already exists") from None
        self.db.refresh(user)
        return user
