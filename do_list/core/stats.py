"""Aggregate statistics over a task collection."""
from datetime import datetime, time, timezone
from typing import Iterable, Optional

from do_list.models.task import Task, TaskStats


def _is_local_offset(moment: datetime) -> bool:
    """True when moment carries a bare offset matching local time at that instant."""
    return (isinstance(moment.tzinfo, timezone)
            and moment.utcoffset() == moment.astimezone().utcoffset())


def start_of_day(moment: datetime) -> datetime:
    """Midnight at the beginning of the calendar day containing moment.

    Naive moments and offsets produced by ``astimezone()`` are local time;
    midnight then takes the local offset in effect at midnight, which
    differs from the offset of ``moment`` on DST transition days. Any
    other tzinfo decides the offset of its own midnight.
    """
    midnight = datetime.combine(moment.date(), time())
    if moment.tzinfo is None or _is_local_offset(moment):
        return midnight.astimezone()
    return midnight.replace(tzinfo=moment.tzinfo)


def compute_stats(tasks: Iterable[Task], now: Optional[datetime] = None) -> TaskStats:
    """Count total, completed, pending and completed-today tasks.

    The day boundary is local midnight of ``now``. A naive ``now`` is
    taken to be local time.

    Args:
        tasks: The task collection
        now: Reference time, defaults to the current local time

    Returns:
        TaskStats for the collection at that moment
    """
    if now is None:
        now = datetime.now().astimezone()
    today = start_of_day(now)

    total = 0
    completed = 0
    completed_today = 0
    for task in tasks:
        total += 1
        if task.completed:
            completed += 1
        if task.completed_at is not None and task.completed_at >= today:
            completed_today += 1

    return TaskStats(
        total=total,
        completed=completed,
        pending=total - completed,
        completed_today=completed_today,
    )
