import logging

from fastapi import APIRouter, HTTPException
from api.schemas import (
    FestivalInput, PredictResponse, PredictionBand, SensitivityEntry,
)
from api.dependencies import (
    build_prediction_input, request_rng, resolve_is_future, resolve_place,
)
from src.model import predict
from src.sensitivity import sensitivities, top_drivers

router = APIRouter()


def _entry(item):
    return SensitivityEntry(name=item.name, value=item.value) if item else None


@router.post(
    "/predict",
    response_model=PredictResponse,
    summary="축제 방문객 수 예측",
    description="예산, 기간, 홍보량, 개최 시기, 개최지, 날씨, 유료 입장 여부로 "
    "예상 방문객 수와 90% 근사 구간을 계산합니다. 요인별 민감도(상위 10개)를 함께 반환합니다. "
    "구간은 통계적 신뢰구간이 아닌 근사치입니다.",
    response_description="예상 방문객(mean/low/high), 민감도 목록, 주요 양/음 요인",
)
async def predict_visitors(req: FestivalInput):
    try:
        inp = build_prediction_input(req)
        pred = predict(inp, rng=request_rng())
        items = sensitivities(inp, pred.mean)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception:
        logging.exception("Predict failed")
        raise HTTPException(status_code=500, detail="예측 계산 중 오류가 발생했습니다")

    top_pos, top_neg = top_drivers(items)
    return PredictResponse(
        total_days=inp.total_days,
        is_future=resolve_is_future(req),
        place=resolve_place(req).to_dict(),
        prediction=PredictionBand(**pred.to_dict()),
        sensitivities=[_entry(item) for item in items],
        top_positive=_entry(top_pos),
        top_negative=_entry(top_neg),
    )
