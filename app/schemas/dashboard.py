"""Schemas for the administrator dashboard summary."""

from pydantic import BaseModel, Field


class RecentZone(BaseModel):
    """Zone row shown in the dashboard's recent list."""

    id: int
    name: str
    type: str
    record_count: int = Field(default=0, ge=0)


class DashboardSummary(BaseModel):
    """Aggregate counts and the most recently created zones (newest first)."""

    total_zones: int = Field(ge=0)
    total_records: int = Field(ge=0)
    total_users: int = Field(ge=0)
    recent_zones: list[RecentZone] = Field(default_factory=list, max_length=5)
