# -*- coding: utf-8 -*-
"""
FestiPlan Visitor Model
=======================
Fixed-coefficient linear model for festival visitor counts with a
heteroscedastic noise term and a Poisson-like uncertainty band.

Formula:
    lp   = b0 + Σ_k b_k · x_k + S(season) + b_w · W(weather)
    mean = max(0, lp + ε),          ε ~ N(0, (0.2 · sqrt(max(1, lp)))²)
    std  = 0.25 · sqrt(mean)
    band = [mean - 1.64·std, mean + 1.64·std]   (clamped at 0)

    Where:
        x_k        : numeric features (총일수, 예산, 전년 방문객, 뉴스/블로그 수,
                     개최 월, KTX, 유료 입장, 시 인구수, 서울편도시간)
        S(season)  : fixed per-season offset, 0 for unknown labels
        W(weather) : ordinal weather index (맑음 0 ~ 폭우 3), 1 for unknown labels

The coefficients are constants, not fitted. The band is a "90%-nominal"
approximation of forecast dispersion, not a statistical confidence interval.

Every call draws from a random generator, so identical inputs may give
different results. Pass ``rng`` (see ``make_rng``) to control this.
"""

import math
import numbers
from dataclasses import asdict, dataclass, field
from types import MappingProxyType
from typing import Tuple

import numpy as np
import pandas as pd


SEASONS = ("봄", "여름", "가을", "겨울")
SEASON_ALIASES = MappingProxyType({
    "spring": "봄",
    "summer": "여름",
    "fall": "가을",
    "autumn": "가을",
    "winter": "겨울",
})

WEATHER_INDEX = MappingProxyType({
    "맑음": 0,
    "흐림": 1,
    "비": 2,
    "폭우": 3,
    "clear": 0,
    "overcast": 1,
    "rain": 2,
    "heavy-rain": 3,
})
DEFAULT_WEATHER_INDEX = 1

NOISE_SCALE = 0.2   # ε std = NOISE_SCALE · sqrt(max(1, lp))
DISPERSION = 0.25   # band std = DISPERSION · sqrt(mean)
Z_90 = 1.64

NUMERIC_FIELDS = (
    "total_days", "budget", "last_year_visitors", "news_count", "blog_count",
    "month", "city_pop", "seoul_minutes",
)


class InvalidInputError(ValueError):
    """Raised for negative or non-finite numeric model inputs."""


@dataclass(frozen=True)
class Coefficients:
    intercept: float = 5000.0
    total_days: float = 400.0
    budget: float = 60.0           # per 백만원
    last_year: float = 0.35
    news: float = 120.0
    blog: float = 18.0
    month: float = 350.0
    weather: float = -1200.0       # per ordinal step
    ktx: float = 8000.0
    ticket: float = -3000.0
    city_pop: float = 0.004
    seoul_min: float = -12.0
    season: Tuple[float, ...] = field(default=(2000.0, 2800.0, 3500.0, 500.0))


COEF = Coefficients()


def _check_numeric(name, value):
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise InvalidInputError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value) or value < 0:
        raise InvalidInputError(f"{name} must be finite and non-negative, got {value!r}")


@dataclass(frozen=True)
class PredictionInput:
    total_days: int
    budget: float                  # 백만원
    last_year_visitors: int
    news_count: int
    blog_count: int
    month: int
    weather: str
    ktx: bool
    ticketed: bool
    city_pop: int
    seoul_minutes: float
    season: str

    def __post_init__(self):
        for name in NUMERIC_FIELDS:
            _check_numeric(name, getattr(self, name))

    def to_dict(self):
        return asdict(self)


@dataclass(frozen=True)
class PredictionResult:
    mean: int
    low: int
    high: int

    def to_dict(self):
        return asdict(self)


def make_rng(seed=None):
    """Random source for noise and scenario sampling (None = OS entropy)."""
    return np.random.default_rng(seed)


def weather_index(weather):
    return WEATHER_INDEX.get(weather, DEFAULT_WEATHER_INDEX)


def season_effect(season, coef=COEF):
    label = SEASON_ALIASES.get(season, season)
    if label not in SEASONS:
        return 0.0
    return coef.season[SEASONS.index(label)]


def _terms(x, coef):
    # x: dict of scalars or DataFrame columns, weather/season already encoded
    return {
        "total_days": coef.total_days * x["total_days"],
        "budget": coef.budget * x["budget"],
        "last_year_visitors": coef.last_year * x["last_year_visitors"],
        "news_count": coef.news * x["news_count"],
        "blog_count": coef.blog * x["blog_count"],
        "month": coef.month * x["month"],
        "weather": coef.weather * x["weather"],
        "ktx": coef.ktx * x["ktx"],
        "ticketed": coef.ticket * x["ticketed"],
        "city_pop": coef.city_pop * x["city_pop"],
        "seoul_minutes": coef.seoul_min * x["seoul_minutes"],
        "season": x["season"],
    }


def feature_terms(inp: PredictionInput, coef: Coefficients = COEF) -> dict:
    """Per-feature linear contributions (intercept excluded)."""
    x = inp.to_dict()
    x["weather"] = weather_index(inp.weather)
    x["season"] = season_effect(inp.season, coef)
    x["ktx"] = 1.0 if inp.ktx else 0.0
    x["ticketed"] = 1.0 if inp.ticketed else 0.0
    return _terms(x, coef)


def linear_score(inp: PredictionInput, coef: Coefficients = COEF) -> float:
    return coef.intercept + sum(feature_terms(inp, coef).values())


def linear_score_frame(inputs: pd.DataFrame, coef: Coefficients = COEF) -> pd.Series:
    """Vectorized ``linear_score`` over a frame with PredictionInput columns."""
    x = {name: inputs[name].astype(float) for name in NUMERIC_FIELDS}
    x["weather"] = inputs["weather"].map(weather_index).astype(float)
    x["season"] = inputs["season"].map(lambda s: season_effect(s, coef)).astype(float)
    x["ktx"] = inputs["ktx"].astype(bool).astype(float)
    x["ticketed"] = inputs["ticketed"].astype(bool).astype(float)
    return coef.intercept + sum(_terms(x, coef).values())


def validate_frame(inputs: pd.DataFrame):
    """Same numeric rule as PredictionInput, applied to every cell."""
    for name in NUMERIC_FIELDS:
        for value in inputs[name].to_numpy(dtype=object):
            _check_numeric(name, value)


def _round_half_up(x):
    return np.floor(np.asarray(x, dtype=float) + 0.5)


def noised_band(lp, z):
    """
    Apply noise and compute (mean, low, high).

    ``z`` are standard normal draws; ε = z · NOISE_SCALE · sqrt(max(1, lp)).
    Works elementwise on scalars or arrays.
    """
    lp = np.asarray(lp, dtype=float)
    z = np.asarray(z, dtype=float)
    noise = z * NOISE_SCALE * np.sqrt(np.maximum(1.0, lp))
    mean = np.maximum(0.0, lp + noise)
    std = np.sqrt(mean) * DISPERSION
    low = np.maximum(0.0, _round_half_up(mean - Z_90 * std))
    high = np.maximum(0.0, _round_half_up(mean + Z_90 * std))
    return _round_half_up(mean), low, high


def predict(inp: PredictionInput, rng=None, coef: Coefficients = COEF) -> PredictionResult:
    """Point estimate and 90%-nominal band for one input."""
    rng = make_rng() if rng is None else rng
    lp = linear_score(inp, coef)
    mean, low, high = noised_band(lp, rng.normal(0.0, 1.0))
    return PredictionResult(mean=int(mean), low=int(low), high=int(high))


def predict_frame(inputs: pd.DataFrame, z, coef: Coefficients = COEF) -> pd.DataFrame:
    """
    Vectorized ``predict`` with pre-drawn standard normals ``z``
    (one per row). Returns visitors/low/high columns on the same index.
    """
    lp = linear_score_frame(inputs, coef).to_numpy()
    mean, low, high = noised_band(lp, z)
    return pd.DataFrame(
        {
            "visitors": mean.astype(np.int64),
            "low": low.astype(np.int64),
            "high": high.astype(np.int64),
        },
        index=inputs.index,
    )
