"""행정구역(광역 → 시/군/구) 참조 데이터 로더."""
import json
import logging
from functools import lru_cache
from pathlib import Path

from src.utils import normalize_region_name

logger = logging.getLogger(__name__)

DISTRICTS_PATH = Path(__file__).parent.parent / "data" / "admin_districts.json"


@lru_cache(maxsize=4)
def load_districts(path=DISTRICTS_PATH):
    """{광역: [시/군/구, ...]} 매핑을 읽어온다 (프로세스당 1회)."""
    with open(path, "r", encoding="utf-8") as f:
        raw = json.load(f)
    # data = [{"서울특별시": [...]}, {"부산광역시": [...]}, ...]
    mapping = {}
    for entry in raw.get("data", []):
        for province, districts in entry.items():
            mapping[province] = tuple(districts)
    logger.info("Admin districts: %d provinces loaded from %s", len(mapping), path)
    return mapping


def get_provinces(path=DISTRICTS_PATH):
    return list(load_districts(path).keys())


def get_districts_by_province(province, path=DISTRICTS_PATH):
    """광역 이름에 해당하는 시/군/구 목록. 없으면 빈 리스트."""
    return list(load_districts(path).get(normalize_region_name(province), ()))
