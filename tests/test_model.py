# -*- coding: utf-8 -*-
"""예측 모델 유닛 테스트"""
import math
from dataclasses import replace

import numpy as np
import pandas as pd
import pytest

from src.model import (
    COEF, InvalidInputError, linear_score, linear_score_frame,
    make_rng, noised_band, predict, predict_frame, season_effect, validate_frame,
    weather_index,
)


def test_zero_input_returns_intercept(zero_input, zero_rng):
    """수치 0 + 기본 범주값이면 절편만 남는다."""
    assert linear_score(zero_input) == COEF.intercept
    result = predict(zero_input, rng=zero_rng)
    assert result.mean == 5000


def test_linear_formula_reproduced_without_noise(base_input, zero_rng):
    expected = (
        5000 + 400 * 10 + 60 * 500 + 0.35 * 80_000 + 120 * 12 + 18 * 350
        + 350 * 4 + 0.004 * 300_000 - 12 * 180 + 2000
    )
    assert linear_score(base_input) == pytest.approx(expected)
    result = predict(base_input, rng=zero_rng)
    assert result.mean == round(expected)


def test_zero_noise_band_matches_formula(base_input, zero_rng):
    result = predict(base_input, rng=zero_rng)
    mean = linear_score(base_input)
    std = math.sqrt(mean) * 0.25
    assert result.low == math.floor(mean - 1.64 * std + 0.5)
    assert result.high == math.floor(mean + 1.64 * std + 0.5)


def test_zero_noise_is_deterministic(base_input, zero_rng):
    first = predict(base_input, rng=zero_rng)
    second = predict(base_input, rng=zero_rng)
    assert first == second


def test_seeded_rng_is_reproducible(base_input):
    assert predict(base_input, rng=make_rng(5)) == predict(base_input, rng=make_rng(5))


@pytest.mark.parametrize("seed", range(20))
def test_band_invariant_holds(base_input, seed):
    rng = make_rng(seed)
    result = predict(base_input, rng=rng)
    assert 0 <= result.low <= result.mean <= result.high


def test_negative_linear_score_is_floored_at_zero(zero_input, zero_rng):
    far = replace(zero_input, seoul_minutes=10_000, weather="폭우", ticketed=True)
    assert linear_score(far) < 0
    result = predict(far, rng=zero_rng)
    assert (result.mean, result.low, result.high) == (0, 0, 0)


def test_noise_grows_with_scale():
    """heteroscedastic: z=1이면 noise = 0.2·sqrt(lp)"""
    mean_small, _, _ = noised_band(100.0, 1.0)
    mean_large, _, _ = noised_band(1_000_000.0, 1.0)
    assert float(mean_small) - 100 == pytest.approx(2.0, abs=0.5)
    assert float(mean_large) - 1_000_000 == pytest.approx(200.0, abs=0.5)


def test_weather_ordinal_and_fallback():
    assert weather_index("맑음") == 0
    assert weather_index("폭우") == 3
    assert weather_index("heavy-rain") == 3
    assert weather_index("눈") == 1
    assert weather_index(None) == 1


def test_season_effects_and_fallback():
    assert season_effect("봄") == 2000
    assert season_effect("가을") == 3500
    assert season_effect("winter") == 500
    assert season_effect("장마철") == 0
    assert season_effect("") == 0


def test_unknown_weather_equals_overcast(base_input):
    overcast = replace(base_input, weather="흐림")
    unknown = replace(base_input, weather="황사")
    assert linear_score(unknown) == linear_score(overcast)


def test_boolean_features_only_when_true(zero_input):
    with_ktx = replace(zero_input, ktx=True)
    ticketed = replace(zero_input, ticketed=True)
    assert linear_score(with_ktx) - linear_score(zero_input) == COEF.ktx
    assert linear_score(ticketed) - linear_score(zero_input) == COEF.ticket


@pytest.mark.parametrize("field_name, value", [
    ("total_days", -1),
    ("budget", float("nan")),
    ("budget", float("inf")),
    ("news_count", -5),
    ("seoul_minutes", -0.1),
])
def test_malformed_numeric_input_rejected(base_input, field_name, value):
    with pytest.raises(InvalidInputError):
        replace(base_input, **{field_name: value})


def test_non_numeric_input_rejected(base_input):
    with pytest.raises(InvalidInputError):
        replace(base_input, budget="500")


def test_frame_score_matches_scalar_score(base_input, zero_input):
    rows = [base_input, zero_input, replace(base_input, weather="비", season="겨울", ktx=True)]
    frame = pd.DataFrame([r.to_dict() for r in rows])
    scores = linear_score_frame(frame)
    for i, row in enumerate(rows):
        assert scores.iloc[i] == pytest.approx(linear_score(row))


def test_predict_frame_matches_predict_without_noise(base_input, zero_rng):
    frame = pd.DataFrame([base_input.to_dict()] * 3)
    scored = predict_frame(frame, np.zeros(3))
    single = predict(base_input, rng=zero_rng)
    assert list(scored["visitors"]) == [single.mean] * 3
    assert list(scored["low"]) == [single.low] * 3
    assert list(scored["high"]) == [single.high] * 3


@pytest.mark.parametrize("value", [True, "4", -1, float("nan")])
def test_validate_frame_uses_scalar_rule(base_input, value):
    """프레임 검증은 PredictionInput과 같은 규칙을 따른다."""
    with pytest.raises(InvalidInputError):
        replace(base_input, budget=value)
    frame = pd.DataFrame([base_input.to_dict(), {**base_input.to_dict(), "budget": value}])
    with pytest.raises(InvalidInputError):
        validate_frame(frame)


def test_validate_frame_accepts_numpy_numbers(base_input):
    frame = pd.DataFrame([base_input.to_dict()] * 2)
    frame["budget"] = frame["budget"].astype("float64")
    validate_frame(frame)
