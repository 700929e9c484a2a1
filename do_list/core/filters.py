"""Filtered views of a task collection."""
from typing import Iterable, List, Union

from do_list.models.task import FilterMode, Task
from do_list.services.exceptions import ValidationError


def parse_filter_mode(mode: Union[FilterMode, str]) -> FilterMode:
    """Accept a FilterMode or its string value."""
    if isinstance(mode, FilterMode):
        return mode
    try:
        return FilterMode(str(mode).strip().lower())
    except ValueError:
        choices = ", ".join(m.value for m in FilterMode)
        raise ValidationError(f"Unknown filter '{mode}' (expected one of: {choices})") from None


def filter_tasks(tasks: Iterable[Task], mode: Union[FilterMode, str] = FilterMode.ALL) -> List[Task]:
    """Return the tasks visible under a filter, keeping their order.

    The result is a new list; the input collection is never modified.
    """
    mode = parse_filter_mode(mode)
    if mode is FilterMode.PENDING:
        return [task for task in tasks if not task.completed]
    if mode is FilterMode.COMPLETED:
        return [task for task in tasks if task.completed]
    return list(tasks)
