# -*- coding: utf-8 -*-
"""
개최지 기반 파생 변수 (시 인구수, KTX 정차 여부, 서울 편도시간).

광역 단위 기본값 테이블만 사용한다. 시/군/구는 인자로 받지만 아직
결과를 보정하지 않는다.
"""
from dataclasses import dataclass
from types import MappingProxyType

from src.utils import normalize_region_name


@dataclass(frozen=True)
class PlaceFeatures:
    city_pop: int
    ktx: bool
    travel_min: float

    def to_dict(self):
        return {"city_pop": self.city_pop, "ktx": self.ktx, "travel_min": self.travel_min}


PROVINCE_DEFAULTS = MappingProxyType({
    "서울특별시": PlaceFeatures(city_pop=9_500_000, ktx=True, travel_min=15),
    "부산광역시": PlaceFeatures(city_pop=3_300_000, ktx=True, travel_min=210),
    "대구광역시": PlaceFeatures(city_pop=2_300_000, ktx=True, travel_min=140),
    "대전광역시": PlaceFeatures(city_pop=1_500_000, ktx=True, travel_min=90),
    "광주광역시": PlaceFeatures(city_pop=1_450_000, ktx=False, travel_min=190),
    "제주특별자치도": PlaceFeatures(city_pop=700_000, ktx=False, travel_min=70),
})

# 테이블에 없는 지역은 보수적인 기본값
DEFAULT_PLACE = PlaceFeatures(city_pop=300_000, ktx=False, travel_min=180)


def derive_place_features(region, sub_region=None):
    """(광역, 시/군/구) 선택으로부터 PlaceFeatures를 반환한다."""
    # TODO: sub_region별 인구/소요시간 보정 테이블이 확정되면 반영
    return PROVINCE_DEFAULTS.get(normalize_region_name(region), DEFAULT_PLACE)
