"""
요청 스키마 → 엔진 입력 변환 및 요청별 난수 생성기.
엔진은 상태가 없으므로 요청마다 새 입력/생성기를 만든다.
"""
import sys
from datetime import datetime
from pathlib import Path

# 프로젝트 루트를 sys.path에 추가
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from src import config
from src.model import PredictionInput, make_rng
from src.places import DEFAULT_PLACE, PlaceFeatures, derive_place_features
from src.utils import is_future_period, total_days_between


def request_rng():
    """FESTIPLAN_SEED가 있으면 재현 가능한 생성기, 없으면 OS 엔트로피."""
    return make_rng(config.SEED)


def resolve_place(req) -> PlaceFeatures:
    """개최지 파생 변수 + 직접 입력값/KTX 수동 지정 반영."""
    if req.region is not None:
        place = derive_place_features(req.region, req.sub_region)
    else:
        place = DEFAULT_PLACE
    return PlaceFeatures(
        city_pop=place.city_pop if req.city_pop is None else req.city_pop,
        ktx=place.ktx if req.ktx is None else req.ktx,
        travel_min=place.travel_min if req.seoul_minutes is None else req.seoul_minutes,
    )


def resolve_total_days(req) -> int:
    if req.total_days is not None:
        return req.total_days
    return total_days_between(req.start_date, req.end_date)


def resolve_is_future(req, now=None):
    if req.start_date is None or req.end_date is None:
        return None
    return is_future_period(req.start_date, req.end_date, now or datetime.now())


def build_prediction_input(req) -> PredictionInput:
    place = resolve_place(req)
    return PredictionInput(
        total_days=resolve_total_days(req),
        budget=req.budget,
        last_year_visitors=req.last_year_visitors,
        news_count=req.news_count,
        blog_count=req.blog_count,
        month=req.month,
        weather=req.weather,
        ktx=place.ktx,
        ticketed=req.ticketed,
        city_pop=place.city_pop,
        seoul_minutes=place.travel_min,
        season=req.season,
    )
