from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from ..core.constants import INBOUND_DATE_FORMAT, OUTBOUND_DATE_FORMAT


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, INBOUND_DATE_FORMAT).date()


def format_dmy(value: Optional[date]) -> Optional[str]:
    """Render a date as DD/MM/YYYY; None stays None."""
    if value is None:
        return None
    return value.strftime(OUTBOUND_DATE_FORMAT)
