"""
pytest 설정 파일
"""
import os
import sys
from pathlib import Path

import numpy as np
import pytest
from fastapi.testclient import TestClient

# 프로젝트 루트를 sys.path에 추가
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

# 테스트 세션에서는 rate limit에 걸리지 않도록
os.environ.setdefault("RATE_LIMIT_PER_MINUTE", "10000")
os.environ.setdefault("FESTIPLAN_SAMPLE_COUNT", "500")


class ZeroNoiseRng:
    """noise 항을 0으로 고정하고 나머지 샘플링은 시드 생성기에 위임하는 스텁"""

    def __init__(self, seed=0):
        self._rng = np.random.default_rng(seed)

    def normal(self, loc=0.0, scale=1.0, size=None):
        if size is None:
            return loc
        return np.full(size, loc, dtype=float)

    def __getattr__(self, name):
        return getattr(self._rng, name)


@pytest.fixture(scope="session")
def test_client():
    """FastAPI 테스트 클라이언트 픽스처"""
    from api.app import app
    with TestClient(app) as client:
        yield client


@pytest.fixture
def zero_rng():
    return ZeroNoiseRng(seed=7)


@pytest.fixture
def seeded_rng():
    return np.random.default_rng(42)


@pytest.fixture
def base_input():
    """진해군항제 기본 입력 (창원시: 기본 개최지 값)"""
    from src.model import PredictionInput

    return PredictionInput(
        total_days=10,
        budget=500,
        last_year_visitors=80_000,
        news_count=12,
        blog_count=350,
        month=4,
        weather="맑음",
        ktx=False,
        ticketed=False,
        city_pop=300_000,
        seoul_minutes=180,
        season="봄",
    )


@pytest.fixture
def zero_input():
    """모든 수치 0, 날씨 맑음(0), 계절 미지정(0)"""
    from src.model import PredictionInput

    return PredictionInput(
        total_days=0,
        budget=0,
        last_year_visitors=0,
        news_count=0,
        blog_count=0,
        month=0,
        weather="맑음",
        ktx=False,
        ticketed=False,
        city_pop=0,
        seoul_minutes=0,
        season="",
    )
