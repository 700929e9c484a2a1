"""Configuration models for Do List."""

from pydantic import BaseModel, Field

from ..core.constants import DEFAULT_SHORT_ID_LENGTH, DEFAULT_STORAGE_KEY
from .task import FilterMode


class DoListConfig(BaseModel):
    """Settings stored alongside the task collection."""
    storage_key: str = Field(
        DEFAULT_STORAGE_KEY,
        min_length=1,
        pattern=r"^[A-Za-z0-9_.-]+$",
        description="Name of the durable record holding the tasks",
    )
    default_filter: FilterMode = Field(FilterMode.ALL, description="Filter used by 'list' when none is given")
    short_id_length: int = Field(DEFAULT_SHORT_ID_LENGTH, ge=4, le=36, description="Characters of the id shown in tables")
    notifications: bool = Field(True, description="Print feedback after each change")
