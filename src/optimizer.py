# -*- coding: utf-8 -*-
"""
Scenario optimizers
===================
Goal Seek : 목표 방문객 이상을 달성하는 후보 중 총비용 최소
Maximize  : 총비용 한도 내에서 예상 방문객 최대

    total_cost = budget + proxy
    proxy      = r_news · news/10 + r_blog · blog/100 + r_day · max(0, days - 3)

Both solvers share the same sampling, merge and cost code (``_search``) and
differ only in the final selection:
    - goal seek : lowest total_cost, ties -> lowest candidate index
    - maximize  : highest visitors,   ties -> lowest candidate index

Evaluation is vectorized over a candidates DataFrame. With ``workers > 1``
the frame is split into chunks evaluated on a thread pool; every random draw
is made up front on the calling thread from a single generator, so the result
does not depend on ``workers``.
"""
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import asdict, dataclass, fields, replace
from typing import Optional

import numpy as np
import pandas as pd

from src.model import (
    PredictionInput, make_rng, predict_frame, validate_frame,
)
from src.places import derive_place_features
from src.scenarios import TUNABLE, ScenarioCandidate, candidates_frame

logger = logging.getLogger(__name__)

DEFAULT_SAMPLE_COUNT = 4000
DEFAULT_TARGET_VISITORS = 100_000
DEFAULT_BUDGET_CAP = 1000        # 백만원
BASELINE_DAYS = 3                # 3일 초과분만 비용 가정

# candidate 값으로 base를 덮어쓰는 필드 (festival_type은 모델 입력이 아님)
MERGED_FIELDS = tuple(name for name in TUNABLE if name != "festival_type")


@dataclass(frozen=True)
class ProxyCostRates:
    """단위 비용 (백만원). None이면 기본값, 0은 그대로 0."""
    news_per_10: Optional[float] = None
    blog_per_100: Optional[float] = None
    per_day: Optional[float] = None

    DEFAULTS = (100.0, 500.0, 2000.0)

    @classmethod
    def zero(cls):
        return cls(news_per_10=0.0, blog_per_100=0.0, per_day=0.0)

    def resolved(self):
        values = (self.news_per_10, self.blog_per_100, self.per_day)
        return tuple(
            default if value is None else float(value)
            for value, default in zip(values, self.DEFAULTS)
        )


def compute_proxy_cost(values, rates=None):
    """
    Proxy cost for promotion volume and extra days.
    ``values`` is any mapping-like with news_count/blog_count/total_days
    (dict, ScenarioCandidate.to_dict(), pandas Series or DataFrame).
    """
    rates = rates or ProxyCostRates()
    news_rate, blog_rate, day_rate = rates.resolved()
    extra_days = np.maximum(0, values["total_days"] - BASELINE_DAYS)
    return (
        news_rate * (values["news_count"] / 10)
        + blog_rate * (values["blog_count"] / 100)
        + day_rate * extra_days
    )


def _place_overrides(place):
    if place is None:
        return {}
    return {
        "city_pop": place.city_pop,
        "ktx": bool(place.ktx),
        "seoul_minutes": place.travel_min,
    }


def merge_candidate(base: PredictionInput, candidate: ScenarioCandidate, place=None) -> PredictionInput:
    """candidate의 조정 변수로 base를 덮어쓴 전체 입력 (month 등은 base 유지)."""
    overrides = {name: getattr(candidate, name) for name in MERGED_FIELDS}
    overrides.update(_place_overrides(place))
    return replace(base, **overrides)


def merge_frame(base: PredictionInput, frame: pd.DataFrame, place=None) -> pd.DataFrame:
    """``merge_candidate`` applied to every row of a candidates frame."""
    values = base.to_dict()
    values.update(_place_overrides(place))
    inputs = pd.DataFrame(
        {name: [value] * len(frame) for name, value in values.items()},
        index=frame.index,
    )
    for name in MERGED_FIELDS:
        inputs[name] = frame[name]
    validate_frame(inputs)
    return inputs


def evaluate_candidates(frame, base, place=None, rates=None, rng=None, workers=1):
    """
    Predict visitors and total cost for each candidate row.
    Returns ``frame`` with visitors/low/high/total_cost columns added.
    """
    rng = make_rng() if rng is None else rng
    inputs = merge_frame(base, frame, place)
    z = np.asarray(rng.normal(0.0, 1.0, size=len(inputs)), dtype=float)

    if workers <= 1 or len(inputs) < 2 * workers:
        scored = predict_frame(inputs, z)
    else:
        chunks = np.array_split(np.arange(len(inputs)), workers)
        with ThreadPoolExecutor(max_workers=workers) as pool:
            parts = pool.map(lambda idx: predict_frame(inputs.iloc[idx], z[idx]), chunks)
            scored = pd.concat(list(parts))

    result = pd.concat([frame, scored], axis=1)
    result["total_cost"] = frame["budget"] + compute_proxy_cost(frame, rates)
    return result


@dataclass(frozen=True)
class OptimizationResult:
    total_days: int
    news_count: int
    blog_count: int
    budget: float
    weather: str
    season: str
    ticketed: bool
    festival_type: str
    visitors: int
    low: int
    high: int
    total_cost: float

    @classmethod
    def from_row(cls, row):
        values = {}
        for f in fields(cls):
            value = row[f.name]
            values[f.name] = value.item() if isinstance(value, np.generic) else value
        return cls(**values)

    @property
    def candidate(self):
        return ScenarioCandidate(**{name: getattr(self, name) for name in TUNABLE})

    def to_dict(self):
        return asdict(self)


def _search(base, locks, ranges, proxy_cost_rates, region, sub_region,
            sample_count, rng, workers):
    rng = make_rng() if rng is None else rng
    # 개최지는 탐색 변수가 아님: 모든 후보에 같은 파생 변수 적용
    place = derive_place_features(region, sub_region) if region is not None else None
    frame = candidates_frame(locks, ranges, sample_count, rng)
    return evaluate_candidates(frame, base, place, proxy_cost_rates, rng, workers)


def goal_seek(base, locks=None, ranges=None, proxy_cost_rates=None,
              region=None, sub_region=None, target_visitors=None,
              sample_count=DEFAULT_SAMPLE_COUNT, rng=None, workers=1):
    """
    목표 방문객 이상 후보 중 최소 총비용. 없으면 None.

    ``region``이 주어지면 모든 후보에 그 지역의 파생 변수를 적용한다.
    ``region=None``이면 기본 프로필로 바꾸지 않고 base의
    city_pop / ktx / seoul_minutes를 그대로 쓴다.
    """
    target = DEFAULT_TARGET_VISITORS if target_visitors is None else target_visitors
    scored = _search(base, locks, ranges, proxy_cost_rates, region, sub_region,
                     sample_count, rng, workers)
    feasible = scored[scored["visitors"] >= target]
    logger.info(
        "Goal seek: %d candidates, %d reach target %s", len(scored), len(feasible), target
    )
    if feasible.empty:
        logger.warning("Goal seek infeasible: no candidate reaches %s visitors", target)
        return None
    # idxmin returns the first (lowest-index) row among equal costs
    return OptimizationResult.from_row(feasible.loc[feasible["total_cost"].idxmin()])


def maximize(base, locks=None, ranges=None, proxy_cost_rates=None,
             region=None, sub_region=None, budget_cap=None,
             sample_count=DEFAULT_SAMPLE_COUNT, rng=None, workers=1):
    """
    총비용 한도 내 최대 방문객. 없으면 None.

    개최지 처리는 ``goal_seek``과 같다: ``region=None``이면 base의
    city_pop / ktx / seoul_minutes를 유지한다.
    """
    cap = DEFAULT_BUDGET_CAP if budget_cap is None else budget_cap
    scored = _search(base, locks, ranges, proxy_cost_rates, region, sub_region,
                     sample_count, rng, workers)
    within = scored[scored["total_cost"] <= cap]
    logger.info(
        "Maximize: %d candidates, %d within budget cap %s", len(scored), len(within), cap
    )
    if within.empty:
        logger.warning("Maximize infeasible: no candidate within budget cap %s", cap)
        return None
    return OptimizationResult.from_row(within.loc[within["visitors"].idxmax()])
