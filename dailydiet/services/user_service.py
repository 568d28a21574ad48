import logging
from typing import List, Optional
from uuid import uuid4

from dailydiet.models.user import User
from dailydiet.models.snack import Snack
from dailydiet.services.metrics_service import user_snack_join

logger = logging.getLogger(__name__)


def create_user(session, session_id: str, name: str, age: float, height: float, weight: float) -> User:
    user = User(
        id=str(uuid4()),
        session_id=session_id,
        name=name,
        age=age,
        height=height,
        weight=weight,
    )
    session.add(user)
    session.commit()
    logger.info(f"Created user {user.id} for session {session_id}")
    return user


def list_users(session) -> List[User]:
    # Not scoped to the caller's session
    return session.query(User).all()


def get_user(session, user_id: str, session_id: str) -> Optional[User]:
    return session.query(User).filter_by(id=user_id, session_id=session_id).first()


def list_user_snacks(session, user_id: str) -> List[Snack]:
    return (
        user_snack_join(session, user_id, Snack)
        .filter(Snack.id.isnot(None))
        .order_by(Snack.date, Snack.time)
        .all()
    )
