# -*- coding: utf-8 -*-
from typing import List, Optional

from fastapi import APIRouter, Query
from api.schemas import DistrictsResponse, PlaceFeaturesResponse
from src.places import derive_place_features
from src.regions import get_districts_by_province, get_provinces

router = APIRouter()


@router.get(
    "/regions",
    response_model=List[str],
    summary="광역 행정구역 목록",
    description="개최지 선택용 광역시/도 목록을 반환합니다.",
)
async def list_provinces():
    return get_provinces()


@router.get(
    "/regions/{province}/districts",
    response_model=DistrictsResponse,
    summary="시/군/구 목록",
    description="광역시/도에 속한 시/군/구 목록을 반환합니다. 없는 지역이면 빈 목록입니다.",
)
async def list_districts(province: str):
    return DistrictsResponse(province=province, districts=get_districts_by_province(province))


@router.get(
    "/place-features",
    response_model=PlaceFeaturesResponse,
    summary="개최지 파생 변수 조회",
    description="선택한 개최지의 시 인구수, KTX 정차 여부, 서울 편도시간(분)을 반환합니다. "
    "등록되지 않은 지역은 기본값(인구 30만, KTX 없음, 180분)을 사용합니다.",
)
async def place_features(
    region: str = Query(..., max_length=40, description="광역시/도 (예: 서울특별시)"),
    sub_region: Optional[str] = Query(None, max_length=40, description="시/군/구"),
):
    place = derive_place_features(region, sub_region)
    return PlaceFeaturesResponse(region=region, sub_region=sub_region, **place.to_dict())
