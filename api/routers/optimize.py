"""
Scenario Optimization Router
============================
Goal Seek (목표 방문객 달성 최소 비용) / Maximize (비용 한도 내 최대 방문객).
Monte-Carlo 탐색이므로 같은 요청도 결과가 달라질 수 있다.
"""
import asyncio
import logging

from fastapi import APIRouter, HTTPException
from api.schemas import (
    GoalSeekRequest, MaximizeRequest, OptimizationResultModel, OptimizeResponse,
)
from api.dependencies import build_prediction_input, request_rng
from src import config
from src.optimizer import ProxyCostRates, goal_seek, maximize

router = APIRouter()


def _solver_kwargs(req):
    base = req.base
    if not req.use_proxy_cost:
        rates = ProxyCostRates.zero()
    elif req.proxy_cost is not None:
        rates = ProxyCostRates(**req.proxy_cost.model_dump())
    else:
        rates = ProxyCostRates()

    # 개최지 변수를 직접 지정한 경우 base 값을 그대로 쓰고 재파생하지 않는다
    manual_place = any(v is not None for v in (base.ktx, base.city_pop, base.seoul_minutes))
    return dict(
        locks=req.locks,
        ranges=req.ranges,
        proxy_cost_rates=rates,
        region=None if manual_place else base.region,
        sub_region=None if manual_place else base.sub_region,
        sample_count=req.sample_count or config.SAMPLE_COUNT,
        rng=request_rng(),
        workers=config.WORKERS,
    )


async def _run(solver, req, **kwargs):
    try:
        base = build_prediction_input(req.base)
        result = await asyncio.to_thread(solver, base, **_solver_kwargs(req), **kwargs)
    except (ValueError, KeyError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception:
        logging.exception("Optimization failed: %s", solver.__name__)
        raise HTTPException(status_code=500, detail="최적화 계산 중 오류가 발생했습니다")

    if result is None:
        return OptimizeResponse(
            status="infeasible",
            message="현재 제약 조건으로는 조건을 만족하는 시나리오가 없습니다",
        )
    return OptimizeResponse(status="ok", result=OptimizationResultModel(**result.to_dict()))


@router.post(
    "/optimize/goal-seek",
    response_model=OptimizeResponse,
    summary="목표 방문객 달성 최소 비용 탐색",
    description="조정 변수(기간, 뉴스/블로그 수, 예산, 날씨, 계절, 유료 여부, 축제 유형)의 "
    "후보를 샘플링하여 목표 방문객 이상을 달성하는 최소 총비용(예산 + 프록시 비용) 시나리오를 찾습니다.",
    response_description="status(ok/infeasible)와 최적 시나리오",
)
async def run_goal_seek(req: GoalSeekRequest):
    return await _run(goal_seek, req, target_visitors=req.target_visitors)


@router.post(
    "/optimize/maximize",
    response_model=OptimizeResponse,
    summary="비용 한도 내 최대 방문객 탐색",
    description="총비용(예산 + 프록시 비용)이 한도 이하인 후보 중 예상 방문객이 최대인 시나리오를 찾습니다.",
    response_description="status(ok/infeasible)와 최적 시나리오",
)
async def run_maximize(req: MaximizeRequest):
    return await _run(maximize, req, budget_cap=req.budget_cap)
