from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional

from flask import current_app

from teamscore.models import utcnow
from . import ledger

DEFAULT_WINDOW_DAYS = 7
DEFAULT_FEED_LIMIT = 10


def _window_days() -> int:
    try:
        return int(current_app.config.get('WEEKLY_WINDOW_DAYS', DEFAULT_WINDOW_DAYS))
    except (TypeError, ValueError):
        return DEFAULT_WINDOW_DAYS


def teams_with_weekly_change(now: Optional[datetime] = None) -> List[Dict[str, Any]]:
    """Every team plus ``recentChange``, the points earned in the trailing window.

    The window is rolling and anchored at ``now``: entries with
    ``timestamp >= now - WEEKLY_WINDOW_DAYS`` count, older ones do not.
    """
    now = now or utcnow()
    cutoff = now - timedelta(days=_window_days())
    result = []
    for team in ledger.list_teams():
        entries = ledger.list_entries_for_team_since(team.id, cutoff)
        payload = team.to_dict()
        payload['recentChange'] = sum(e.points for e in entries)
        result.append(payload)
    return result


def recent_activity_feed(limit: int = DEFAULT_FEED_LIMIT) -> List[Dict[str, Any]]:
    """Newest-first entries joined with their team, at most ``limit`` items."""
    if limit <= 0:
        return []
    return [e.to_dict(include_team=True) for e in ledger.list_recent_entries(limit)]
