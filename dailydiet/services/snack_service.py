"""
Snack Service

Handles snack logging: creation together with its user link, session-scoped
reads, updates and deletes.
"""

import logging
import datetime as dt
from typing import List
from uuid import uuid4
from sqlalchemy.exc import SQLAlchemyError

from dailydiet.models.user import User
from dailydiet.models.snack import Snack
from dailydiet.models.user_snack_link import UserSnackLink

logger = logging.getLogger(__name__)


def create_snack(
    session,
    session_id: str,
    user_id: str,
    title: str,
    description: str,
    at_diet: bool,
    date: dt.date,
    time: dt.time,
) -> Snack:
    """
    Insert a snack and its user link as one transaction.

    Raises:
        ValueError: If the user does not exist
        SQLAlchemyError: For database errors (after rolling back)
    """
    if session.get(User, user_id) is None:
        raise ValueError("USER_NOT_FOUND: userId does not exist")

    snack = Snack(
        id=str(uuid4()),
        session_id=session_id,
        title=title,
        description=description,
        at_diet=at_diet,
        date=date,
        time=time,
    )
    try:
        session.add(snack)
        session.flush()
        session.add(UserSnackLink(id=str(uuid4()), user_id=user_id, snack_id=snack.id))
        session.commit()
    except SQLAlchemyError:
        session.rollback()
        raise

    logger.info(f"Created snack {snack.id} for user {user_id}")
    return snack


def list_snacks(session, session_id: str) -> List[Snack]:
    return (
        session.query(Snack)
        .filter_by(session_id=session_id)
        .order_by(Snack.date, Snack.time)
        .all()
    )


def get_snacks(session, snack_id: str, session_id: str) -> List[Snack]:
    """At most one row; returned as a list to match the listing shape."""
    return session.query(Snack).filter_by(id=snack_id, session_id=session_id).all()


def update_snack(session, snack_id: str, session_id: str, **fields) -> int:
    """Replace every editable field. Returns the number of rows touched."""
    updated = (
        session.query(Snack)
        .filter_by(id=snack_id, session_id=session_id)
        .update(
            {
                Snack.title: fields["title"],
                Snack.description: fields["description"],
                Snack.at_diet: fields["at_diet"],
                Snack.date: fields["date"],
                Snack.time: fields["time"],
            },
            synchronize_session=False,
        )
    )
    session.commit()
    logger.info(f"Updated snack {snack_id}: {updated} row(s)")
    return updated


def delete_snack(session, snack_id: str, session_id: str) -> int:
    snack = session.query(Snack).filter_by(id=snack_id, session_id=session_id).first()
    if not snack:
        logger.info(f"Deleted snack {snack_id}: 0 row(s)")
        return 0

    try:
        session.query(UserSnackLink).filter_by(snack_id=snack.id).delete(synchronize_session=False)
        session.delete(snack)
        session.commit()
    except SQLAlchemyError:
        session.rollback()
        raise

    logger.info(f"Deleted snack {snack_id}: 1 row(s)")
    return 1


def list_links(session) -> List[UserSnackLink]:
    return session.query(UserSnackLink).all()
