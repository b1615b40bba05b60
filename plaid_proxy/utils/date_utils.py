"""Date manipulation utilities"""

from datetime import date, timedelta
from typing import Optional, Tuple

PLAID_DATE_FORMAT = "%Y-%m-%d"


def transactions_window(today: Optional[date] = None, days: int = 30) -> Tuple[str, str]:
    """Return (start_date, end_date) for a rolling window ending today, local clock"""
    end = today or date.today()
    start = end - timedelta(days=days)
    return start.strftime(PLAID_DATE_FORMAT), end.strftime(PLAID_DATE_FORMAT)
