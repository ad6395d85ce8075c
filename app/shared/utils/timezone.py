from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo

from app.config.settings import settings

BUSINESS_DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def business_now(now: Optional[datetime] = None) -> str:
    """Current time in the business timezone as 'YYYY-MM-DD HH:MM:SS' (24h)"""
    zone = ZoneInfo(settings.business_timezone)
    moment = now.astimezone(zone) if now is not None else datetime.now(zone)
    return moment.strftime(BUSINESS_DATETIME_FORMAT)
