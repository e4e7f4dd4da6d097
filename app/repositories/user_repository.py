from typing import List, Optional
from app.extensions import db
from app.models import User


class UserRepository:
    @staticmethod
    def create(user: User) -> User:
        db.session.add(user)
        db.session.commit()
        return user

    @staticmethod
    def find_by_external_id(external_id: str) -> Optional[User]:
        return User.query.filter_by(external_id=external_id).first()

    @staticmethod
    def find_by_id(user_id: int) -> Optional[User]:
        return db.session.get(User, user_id)

    @staticmethod
    def get_users() -> List[User]:
        return User.query.order_by(User.id.asc()).all()

    @staticmethod
    def save(user: User) -> User:
        db.session.add(user)
        db.session.commit()
        return user
