"""Human-readable "time since last refresh" label."""

from datetime import datetime

LOADING_LABEL = "Loading..."


def status_label(last_refresh_at: datetime | None, now: datetime) -> str:
    if last_refresh_at is None:
        return LOADING_LABEL
    diff = int((now - last_refresh_at).total_seconds())
    if diff < 60:
        return "just now"
    if diff < 3600:
        return f"{diff // 60} minutes ago"
    return f"{diff // 3600} hours ago"


def format_status_line(label: str) -> str:
    if label == LOADING_LABEL:
        return label
    return f"Last refreshed: {label}"
