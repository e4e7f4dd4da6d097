from typing import List, Optional
from app.extensions import db
from app.models import Child


class ChildRepository:
    @staticmethod
    def find_by_id(child_id: int) -> Optional[Child]:
        return db.session.get(Child, child_id)

    @staticmethod
    def find_by_user(user_id: int) -> List[Child]:
        return (
            Child.query.filter_by(parent_user_id=user_id)
            .order_by(Child.first_name.asc(), Child.id.asc())
            .all()
        )

    @staticmethod
    def create(attrs) -> Child:
        child = Child(**attrs)
        db.session.add(child)
        db.session.commit()
        return child

    @staticmethod
    def update(child: Child, attrs: dict) -> Child:
        for key, value in attrs.items():
            setattr(child, key, value)
        db.session.commit()
        return child

    @staticmethod
    def delete(child: Child):
        db.session.delete(child)
        db.session.commit()
