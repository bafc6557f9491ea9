# File: expense_tracker/repositories/user_repository.py

"""
User repository.

Thin data-access layer over the ``users`` table. All queries go through
the SQLAlchemy session handed in by the caller; the repository never
opens or closes sessions itself.
"""

from typing import List, Optional

from sqlalchemy.orm import Session

from expense_tracker.models.user import User


# Ids are signed 64-bit integers on every supported backend
MIN_ID = -(2**63)
MAX_ID = 2**63 - 1


class UserRepository:
    def __init__(self, db: Session):
        self.db = db

    def find_all(self) -> List[User]:
        return self.db.query(User).order_by(User.id.asc()).all()

    def find_by_id(self, user_id: int) -> Optional[User]:
        if not MIN_ID <= user_id <= MAX_ID:
            return None
        return self.db.get(User, user_id)

    def find_by_username(self, username: str) -> Optional[User]:
        return self.db.query(User).filter(User.username == username).first()

    def exists_by_username(self, username: str) -> bool:
        return self.db.query(User.id).filter(User.username == username).first() is not None

    def exists_by_email(self, email: str) -> bool:
        return self.db.query(User.id).filter(User.email == email).first() is not None

    def save(self, user: User) -> User:
        """
        Persist a user and return it with store-assigned fields loaded.

        Unique-constraint violations surface as ``IntegrityError``; the
        session is rolled back before the error propagates.
        """
        self.db.add(user)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(user)
        return user
