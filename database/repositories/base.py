from sqlalchemy.orm import Session


class BaseRepository:
    """Shares one Session per request; callers own commit and rollback."""

    def __init__(self, db: Session):
        self.db = db

    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()

    def refresh(self, instance) -> None:
        self.db.refresh(instance)
