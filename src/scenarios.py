# -*- coding: utf-8 -*-
"""
Scenario candidate generator.

Each tunable variable gets a domain, resolved in priority order:
    1. lock   -> the single pinned value
    2. range  -> the caller's list, used verbatim
    3. default grid / enumeration

Candidates are drawn by sampling every variable independently and uniformly
from its domain. This is a Monte-Carlo pass over the Cartesian product, not a
grid walk: more samples never hurt search quality in expectation but cost
linearly more.
"""
from dataclasses import asdict, dataclass
from types import MappingProxyType

import numpy as np
import pandas as pd

from src.model import SEASONS, make_rng

FESTIVAL_TYPES = ("문화예술", "음악", "전통", "푸드", "기타")

VAR_ENUMS = MappingProxyType({
    "festival_type": FESTIVAL_TYPES,
    "ticketed": (False, True),
    "weather": ("맑음", "흐림", "비"),
    "season": SEASONS,
})

GRID = MappingProxyType({
    "total_days": tuple(range(2, 8)),
    "news_count": (10, 20, 30, 40, 50, 60, 80, 100),
    "blog_count": (100, 200, 300, 400, 500, 700, 1000),
    "budget": tuple(range(50, 3001, 50)),  # 0.5억~30억 (백만원)
})

TUNABLE = (
    "total_days", "news_count", "blog_count", "budget",
    "weather", "season", "ticketed", "festival_type",
)


@dataclass(frozen=True)
class ScenarioCandidate:
    total_days: int
    news_count: int
    blog_count: int
    budget: float
    weather: str
    season: str
    ticketed: bool
    festival_type: str

    def to_dict(self):
        return asdict(self)


def _py(value):
    return value.item() if isinstance(value, np.generic) else value


def resolve_domain(name, locks=None, ranges=None):
    """변수 하나의 후보 도메인 (lock > range > 기본 격자)."""
    if name not in TUNABLE:
        raise KeyError(f"Unknown scenario variable: {name}")
    locks = locks or {}
    ranges = ranges or {}

    if locks.get(name) is not None:
        return (locks[name],)
    if ranges.get(name) is not None:
        domain = tuple(ranges[name])
        if not domain:
            raise ValueError(f"Empty range for scenario variable: {name}")
        return domain
    return GRID[name] if name in GRID else VAR_ENUMS[name]


def candidates_frame(locks=None, ranges=None, sample_count=4000, rng=None):
    """Sample ``sample_count`` candidates as a DataFrame (row order = candidate order)."""
    if sample_count < 0:
        raise ValueError("sample_count must be non-negative")
    unknown = sorted((set(locks or {}) | set(ranges or {})) - set(TUNABLE))
    if unknown:
        raise ValueError(f"Unknown scenario variables: {', '.join(unknown)}")
    rng = make_rng() if rng is None else rng

    columns = {}
    for name in TUNABLE:
        domain = resolve_domain(name, locks, ranges)
        picks = rng.integers(0, len(domain), size=sample_count)
        columns[name] = [_py(domain[i]) for i in picks]
    return pd.DataFrame(columns, columns=list(TUNABLE))


def generate_scenarios(base, locks=None, ranges=None, sample_count=4000, rng=None):
    """
    Candidate list for the optimizers.

    ``base`` does not constrain sampling; month and place fields are taken
    from it later, when a candidate is merged for prediction.
    """
    frame = candidates_frame(locks, ranges, sample_count, rng)
    return [ScenarioCandidate(**row) for row in frame.to_dict("records")]
