# -*- coding: utf-8 -*-
"""개최지 파생 변수 / 행정구역 참조 데이터 테스트"""
from dataclasses import FrozenInstanceError

import pytest

from src.places import DEFAULT_PLACE, PROVINCE_DEFAULTS, PlaceFeatures, derive_place_features
from src.regions import get_districts_by_province, get_provinces


def test_seoul_profile():
    place = derive_place_features("서울특별시", "강남구")
    assert place == PlaceFeatures(city_pop=9_500_000, ktx=True, travel_min=15)


def test_unknown_region_falls_back_to_default():
    place = derive_place_features("없는도", "어딘가")
    assert place.city_pop == 300_000
    assert place.ktx is False
    assert place.travel_min == 180
    assert place == DEFAULT_PLACE


def test_none_region_falls_back_to_default():
    assert derive_place_features(None) == DEFAULT_PLACE


def test_sub_region_does_not_refine_result():
    """시/군/구는 아직 결과에 영향을 주지 않는다."""
    a = derive_place_features("부산광역시", "해운대구")
    b = derive_place_features("부산광역시", "기장군")
    assert a == b == PROVINCE_DEFAULTS["부산광역시"]


def test_region_name_whitespace_is_normalized():
    assert derive_place_features(" 대전 광역시 ") == PROVINCE_DEFAULTS["대전광역시"]


def test_gwangju_has_no_ktx_flag():
    assert derive_place_features("광주광역시").ktx is False


def test_defaults_table_is_read_only():
    with pytest.raises(TypeError):
        PROVINCE_DEFAULTS["세종특별자치시"] = DEFAULT_PLACE
    with pytest.raises(FrozenInstanceError):
        setattr(DEFAULT_PLACE, "city_pop", 1)


def test_provinces_listed_in_dataset_order():
    provinces = get_provinces()
    assert provinces[0] == "서울특별시"
    assert "경상남도" in provinces
    assert len(provinces) == len(set(provinces))


def test_districts_by_province():
    districts = get_districts_by_province("경상남도")
    assert "창원시" in districts


def test_districts_for_unknown_province_is_empty():
    assert get_districts_by_province("없는도") == []
