"""
Metrics Service

Aggregates a user's logged snacks through the users -> relusersnack -> snack
double left join.
"""

import logging
from typing import Any, Dict, List, Optional
from sqlalchemy import func

from dailydiet.models.user import User
from dailydiet.models.snack import Snack
from dailydiet.models.user_snack_link import UserSnackLink

logger = logging.getLogger(__name__)


def user_snack_join(session, user_id: str, *columns):
    """
    Base query over users LEFT JOIN relusersnack LEFT JOIN snack, restricted
    to link rows owned by ``user_id``.
    """
    return (
        session.query(*columns)
        .select_from(User)
        .outerjoin(UserSnackLink, UserSnackLink.user_id == User.id)
        .outerjoin(Snack, UserSnackLink.snack_id == Snack.id)
        .filter(UserSnackLink.user_id == user_id)
    )


def count_snacks(session, user_id: str, at_diet: Optional[bool] = None) -> int:
    # Counting snack ids keeps dangling links out of the totals
    query = user_snack_join(session, user_id, func.count(Snack.id))
    if at_diet is not None:
        query = query.filter(Snack.at_diet.is_(at_diet))
    return int(query.scalar() or 0)


def diet_days(session, user_id: str) -> List[Dict[str, Any]]:
    """
    Within-diet snack counts grouped by calendar date, oldest first.

    This is a per-date group size, not a consecutive-day streak.
    """
    rows = (
        user_snack_join(session, user_id, Snack.date, func.count(Snack.id))
        .filter(Snack.at_diet.is_(True))
        .group_by(Snack.date)
        .order_by(Snack.date)
        .all()
    )
    return [
        {"date": day.isoformat() if day else None, "count": int(count)}
        for day, count in rows
    ]


def user_metrics(session, user_id: str) -> Dict[str, Any]:
    """
    Compute total, withinDiet, offDiet and bestSequence for ``user_id``.

    Each aggregate runs as its own query; an unknown user yields zeros and
    an empty bestSequence.
    """
    metrics = {
        "total": count_snacks(session, user_id),
        "withinDiet": count_snacks(session, user_id, at_diet=True),
        "offDiet": count_snacks(session, user_id, at_diet=False),
        "bestSequence": diet_days(session, user_id),
    }
    logger.debug(f"Metrics for user {user_id}: {metrics}")
    return metrics
