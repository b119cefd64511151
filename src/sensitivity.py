# -*- coding: utf-8 -*-
"""
Elasticity-style sensitivity of the visitor estimate.

value(k) = b_k · x_k / max(1, ŷ)

Only the linear score is decomposed; the noise term is excluded. This is a
ranking aid, not a partial derivative of a fitted model.
"""
from dataclasses import asdict, dataclass

from src.model import COEF, feature_terms

MAX_ITEMS = 10

# 화면 표시 순서 = 동률일 때의 순서
FEATURE_LABELS = (
    ("total_days", "총일수"),
    ("budget", "예산(백만원)"),
    ("last_year_visitors", "전년 방문객"),
    ("news_count", "뉴스 수"),
    ("blog_count", "블로그 수"),
    ("month", "개최 월"),
    ("weather", "날씨 지수"),
    ("ktx", "KTX"),
    ("ticketed", "유료 입장"),
    ("city_pop", "시 인구수"),
    ("seoul_minutes", "서울편도시간(분)"),
    ("season", "계절(효과)"),
)


@dataclass(frozen=True)
class SensitivityItem:
    name: str
    value: float

    def to_dict(self):
        return asdict(self)


def sensitivities(inp, predicted_mean, coef=COEF):
    """Top-10 normalized contributions, sorted by |value| descending."""
    terms = feature_terms(inp, coef)
    denom = max(1.0, float(predicted_mean))
    items = [
        SensitivityItem(name=label, value=round(terms[key] / denom, 3))
        for key, label in FEATURE_LABELS
    ]
    # list.sort is stable with reverse=True, ties keep FEATURE_LABELS order
    items.sort(key=lambda item: abs(item.value), reverse=True)
    return items[:MAX_ITEMS]


def top_drivers(items):
    """(가장 큰 양의 요인, 가장 큰 음의 요인). 없으면 None."""
    by_abs = sorted(items, key=lambda item: abs(item.value), reverse=True)
    top_pos = next((item for item in by_abs if item.value >= 0), None)
    top_neg = next((item for item in by_abs if item.value < 0), None)
    return top_pos, top_neg
