"""Common utilities for FestiPlan."""
import math
import re
from datetime import date, datetime

import pandas as pd


def normalize_region_name(name):
    """Normalize Korean administrative region names."""
    if name is None or (not isinstance(name, str) and pd.isna(name)):
        return ""
    name = str(name)
    name = re.sub(r"\([^)]*\)", "", name)
    name = re.sub(r"\s+", "", name)
    return name.strip()


def _as_datetime(value):
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    return pd.Timestamp(value).to_pydatetime()


def total_days_between(start, end):
    """축제 시작일~종료일을 포함한 총 일수 (최소 1일)."""
    delta = _as_datetime(end) - _as_datetime(start)
    days = math.ceil(delta.total_seconds() / 86400)
    return max(1, days + 1)


def is_future_period(start, end, now=None):
    """시작일과 종료일이 모두 현재 이후인지 확인한다."""
    now = now or datetime.now()
    return _as_datetime(start) > now and _as_datetime(end) > now
