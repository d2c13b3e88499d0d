from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from api.dependencies import get_click_tracker
from api.schemas import ClickStatResponse, ClickStatsResponse
from infrastructure.cache.click_tracker import RedisClickTracker

router = APIRouter(prefix='/api/clicks', tags=['clicks'])


@router.get(
	'',
	response_model=ClickStatsResponse,
	status_code=status.HTTP_200_OK,
	summary='Outbound clicks per provider',
)
async def get_click_stats(
	tracker: Annotated[RedisClickTracker, Depends(get_click_tracker)],
) -> ClickStatsResponse:
	stats = await tracker.get_click_stats()
	return ClickStatsResponse(clicks={s.provider_name: s.clicks for s in stats})


@router.get(
	'/recent',
	response_model=list[ClickStatResponse],
	status_code=status.HTTP_200_OK,
	summary='Most recent outbound clicks, newest first',
)
async def get_recent_clicks(
	tracker: Annotated[RedisClickTracker, Depends(get_click_tracker)],
	limit: Annotated[int, Query(ge=1, le=500)] = 50,
) -> list[ClickStatResponse]:
	clicks = await tracker.get_recent_clicks(limit=limit)
	return [ClickStatResponse.from_domain(c) for c in clicks]
