# Standard library imports
from typing import Optional

# External package imports
from sqlalchemy import select

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from .base_repository import SqlRepository
from .tables import UserRow


class SqlUserRepository(SqlRepository, UserRepository):
    """SQLAlchemy implementation of UserRepository"""
    
    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Find user by email address (exact match)
        
        Args:
            email: Email address to search for
            
        Returns:
            User domain model if found, None otherwise
        """
        if not email:
            return None
        return await self._run("find_user_by_email", "Error checking user.", self._find_by_email, email)
    
    async def save(self, user: User) -> User:
        """
        Insert a new user
        
        Raises:
            ConflictError: If the email was registered concurrently
        """
        return await self._run(
            "insert_user",
            "Error creating user.",
            self._insert,
            user,
            conflict_message="A user with this email already exists.",
        )
    
    def _find_by_email(self, email: str) -> Optional[User]:
        with self.session_factory() as session:
            row = session.scalar(select(UserRow).where(UserRow.email == email))
            return self._row_to_user(row) if row is not None else None
    
    def _insert(self, user: User) -> User:
        with self.session_factory() as session:
            row = UserRow(
                name=user.name,
                email=user.email,
                password_hash=user.password_hash,
            )
            session.add(row)
            session.commit()
            session.refresh(row)
            return self._row_to_user(row)
    
    @staticmethod
    def _row_to_user(row: UserRow) -> User:
        return User(
            id=row.id,
            name=row.name,
            email=row.email,
            password_hash=row.password_hash,
        )
