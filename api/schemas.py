from datetime import date
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field, model_validator


# 변수명 → 고정값 / 후보 목록
LockValue = Union[bool, int, float, str]


class PlaceFeaturesResponse(BaseModel):
    region: str
    sub_region: Optional[str] = None
    city_pop: int
    ktx: bool
    travel_min: float


class DistrictsResponse(BaseModel):
    province: str
    districts: List[str]


class FestivalInput(BaseModel):
    """예측/최적화 공통 기본 입력. 총일수 또는 시작일/종료일 중 하나 필요."""
    total_days: Optional[int] = Field(None, ge=1, le=365)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    budget: float = Field(ge=0, le=1_000_000)  # 백만원
    last_year_visitors: int = Field(0, ge=0)
    news_count: int = Field(0, ge=0)
    blog_count: int = Field(0, ge=0)
    month: int = Field(ge=1, le=12)
    weather: str = Field("맑음", max_length=20)
    season: str = Field(max_length=20)
    ticketed: bool = False
    region: Optional[str] = Field(None, max_length=40)
    sub_region: Optional[str] = Field(None, max_length=40)
    ktx: Optional[bool] = None  # None이면 개최지 기준 자동
    city_pop: Optional[int] = Field(None, ge=0)
    seoul_minutes: Optional[float] = Field(None, ge=0)

    @model_validator(mode="after")
    def check_duration(self):
        if self.total_days is None and (self.start_date is None or self.end_date is None):
            raise ValueError("total_days 또는 start_date/end_date가 필요합니다")
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("end_date는 start_date 이후여야 합니다")
        return self


class PredictionBand(BaseModel):
    mean: int
    low: int
    high: int


class SensitivityEntry(BaseModel):
    name: str
    value: float


class PredictResponse(BaseModel):
    total_days: int
    is_future: Optional[bool] = None
    place: Dict[str, Any]
    prediction: PredictionBand
    sensitivities: List[SensitivityEntry]
    top_positive: Optional[SensitivityEntry] = None
    top_negative: Optional[SensitivityEntry] = None


class ProxyCostRatesModel(BaseModel):
    news_per_10: Optional[float] = Field(None, ge=0)
    blog_per_100: Optional[float] = Field(None, ge=0)
    per_day: Optional[float] = Field(None, ge=0)


class OptimizeOptions(BaseModel):
    base: FestivalInput
    locks: Dict[str, Optional[LockValue]] = Field(default_factory=dict)
    ranges: Dict[str, List[LockValue]] = Field(default_factory=dict)
    proxy_cost: Optional[ProxyCostRatesModel] = None
    use_proxy_cost: bool = True  # False면 비용 프록시 0 (예산만)
    sample_count: Optional[int] = Field(None, ge=1, le=50_000)


class GoalSeekRequest(OptimizeOptions):
    target_visitors: int = Field(100_000, ge=0)


class MaximizeRequest(OptimizeOptions):
    budget_cap: float = Field(1000, ge=0)


class OptimizationResultModel(BaseModel):
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


class OptimizeResponse(BaseModel):
    status: str  # ok | infeasible
    result: Optional[OptimizationResultModel] = None
    message: Optional[str] = None
