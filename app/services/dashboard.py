"""Administrator dashboard: aggregate counts and the most recent zones."""

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.models import Domain, Record, User
from app.schemas.dashboard import DashboardSummary, RecentZone

RECENT_ZONES_LIMIT = 5


def recent_zones(db: Session, limit: int = RECENT_ZONES_LIMIT) -> list[RecentZone]:
    """Return the newest zones by id (descending), each with its record count."""
    domains = db.query(Domain).order_by(Domain.id.desc()).limit(limit).all()
    if not domains:
        return []
    counts = dict(
        db.query(Record.domain_id, func.count(Record.id))
        .filter(Record.domain_id.in_([d.id for d in domains]))
        .group_by(Record.domain_id)
        .all()
    )
    return [
        RecentZone(id=d.id, name=d.name, type=d.type, record_count=counts.get(d.id, 0))
        for d in domains
    ]


def build_dashboard_summary(db: Session) -> DashboardSummary:
    """
    Count zones, records and users and list the recent zones.

    Read-only. Query errors propagate to the caller unchanged.
    """
    total_zones = db.query(func.count(Domain.id)).scalar() or 0
    total_records = db.query(func.count(Record.id)).scalar() or 0
    total_users = db.query(func.count(User.id)).scalar() or 0
    return DashboardSummary(
        total_zones=total_zones,
        total_records=total_records,
        total_users=total_users,
        recent_zones=recent_zones(db),
    )
