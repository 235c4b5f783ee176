from dataclasses import dataclass
from sqlalchemy.engine import Engine
from sqlmodel import Session
from thoughtvault.models.base import utcnow
from thoughtvault.models.usage import UsageCount
from thoughtvault.logging import logger


@dataclass(frozen=True)
class UsageStatus:
    count: int
    limit: int

    @property
    def is_limit_reached(self) -> bool:
        return self.count >= self.limit


class UsageLimitReached(Exception):
    def __init__(self, status: UsageStatus):
        super().__init__(f"Usage limit reached ({status.count}/{status.limit})")
        self.status = status


class UsageTracker:
    """Per-user summary counter backed by the local database."""

    def __init__(self, engine: Engine, limit: int):
        self.engine = engine
        self.limit = limit

    def _check_user(self, user_id: str):
        if not user_id or not user_id.strip():
            raise ValueError("User ID is required")

    def status(self, user_id: str) -> UsageStatus:
        self._check_user(user_id)
        with Session(self.engine) as session:
            row = session.get(UsageCount, user_id)
            return UsageStatus(count=row.count if row else 0, limit=self.limit)

    def increment(self, user_id: str) -> UsageStatus:
        self._check_user(user_id)
        with Session(self.engine) as session:
            row = session.get(UsageCount, user_id)
            if row is None:
                row = UsageCount(user_id=user_id)
            row.count += 1
            row.last_used = utcnow()
            session.add(row)
            session.commit()
            count = row.count

        status = UsageStatus(count=count, limit=self.limit)
        if status.is_limit_reached:
            logger.info(f"User {user_id} reached the usage limit ({count}/{self.limit})")
        return status

    def reset(self, user_id: str) -> bool:
        """Forget a user's usage. Returns False when there was nothing to reset."""
        self._check_user(user_id)
        with Session(self.engine) as session:
            row = session.get(UsageCount, user_id)
            if row is None:
                return False
            session.delete(row)
            session.commit()
        logger.info(f"Reset usage for user {user_id}")
        return True
