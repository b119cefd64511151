# -*- coding: utf-8 -*-
"""utils 엣지 테스트"""
from datetime import date, datetime

from src.utils import is_future_period, normalize_region_name, total_days_between


def test_normalize_region_name_handles_none_and_nan():
    """결측 입력은 빈 문자열로 정규화한다."""
    assert normalize_region_name(None) == ""
    assert normalize_region_name(float("nan")) == ""


def test_normalize_region_name_removes_spaces_and_parentheses():
    assert normalize_region_name(" 경상 남도 ") == "경상남도"
    assert normalize_region_name("서울특별시(Seoul)") == "서울특별시"


def test_total_days_single_day_is_one():
    assert total_days_between(date(2025, 4, 1), date(2025, 4, 1)) == 1


def test_total_days_inclusive_range():
    assert total_days_between("2025-04-01", "2025-04-10") == 10


def test_total_days_never_below_one():
    assert total_days_between(date(2025, 4, 10), date(2025, 4, 1)) == 1


def test_is_future_period():
    now = datetime(2025, 3, 1)
    assert is_future_period(date(2025, 4, 1), date(2025, 4, 10), now=now) is True
    assert is_future_period(date(2025, 2, 1), date(2025, 4, 10), now=now) is False
