from typing import Annotated

from fastapi import APIRouter, BackgroundTasks, Depends, Path, status

from api.dependencies import get_currency_service, get_session_store
from api.schemas import (
	ClickRequest,
	ComparisonRequest,
	ComparisonResultResponse,
	SessionResponse,
	SortRequest,
	SwapRequest,
)
from application.services import ComparisonSession, CurrencyService, SessionStore

router = APIRouter(prefix='/api/sessions', tags=['comparison'])


def to_session_response(session: ComparisonSession) -> SessionResponse:
	snapshot = session.snapshot
	result = session.result
	return SessionResponse(
		id=session.id,
		state=snapshot.state,
		sort=session.sort_strategy,
		source_currency=snapshot.corridor.source,
		target_currency=snapshot.corridor.target,
		amount=snapshot.amount,
		best_receive_amount=result.best_receive_amount if result else 0,
		result=(
			ComparisonResultResponse.from_domain(result, session.ranked_offers())
			if result
			else None
		),
		error=snapshot.error,
	)


def get_session(
	session_id: Annotated[str, Path(min_length=1)],
	store: Annotated[SessionStore, Depends(get_session_store)],
) -> ComparisonSession:
	return store.get(session_id)


@router.post(
	'',
	response_model=SessionResponse,
	status_code=status.HTTP_201_CREATED,
	summary='Start a comparison session',
)
async def create_session(
	store: Annotated[SessionStore, Depends(get_session_store)],
) -> SessionResponse:
	return to_session_response(store.create())


@router.get(
	'/{session_id}',
	response_model=SessionResponse,
	status_code=status.HTTP_200_OK,
	summary='Get the current state of a comparison session',
)
async def read_session(
	session: Annotated[ComparisonSession, Depends(get_session)],
) -> SessionResponse:
	return to_session_response(session)


@router.post(
	'/{session_id}/comparisons',
	response_model=SessionResponse,
	status_code=status.HTTP_200_OK,
	summary='Compare transfer offers for a corridor',
)
async def request_comparison(
	request: ComparisonRequest,
	session: Annotated[ComparisonSession, Depends(get_session)],
) -> SessionResponse:
	await session.request_comparison(
		request.amount, request.source_currency, request.target_currency
	)
	return to_session_response(session)


@router.put(
	'/{session_id}/sort',
	response_model=SessionResponse,
	status_code=status.HTTP_200_OK,
	summary='Change how offers are ordered',
)
async def set_sort_strategy(
	request: SortRequest,
	session: Annotated[ComparisonSession, Depends(get_session)],
) -> SessionResponse:
	session.set_sort_strategy(request.strategy)
	return to_session_response(session)


@router.post(
	'/{session_id}/swap',
	response_model=SessionResponse,
	status_code=status.HTTP_200_OK,
	summary='Swap source and target currencies',
)
async def swap_currencies(
	request: SwapRequest,
	session: Annotated[ComparisonSession, Depends(get_session)],
) -> SessionResponse:
	session.swap(request.source_currency, request.target_currency)
	return to_session_response(session)


@router.post(
	'/{session_id}/samples/{index}',
	response_model=SessionResponse,
	status_code=status.HTTP_200_OK,
	summary='Load a sample corridor',
)
async def apply_sample(
	index: Annotated[int, Path(ge=0)],
	session: Annotated[ComparisonSession, Depends(get_session)],
	service: Annotated[CurrencyService, Depends(get_currency_service)],
) -> SessionResponse:
	session.apply_sample(service.get_sample(index))
	return to_session_response(session)


@router.post(
	'/{session_id}/clicks',
	status_code=status.HTTP_202_ACCEPTED,
	summary='Record an outbound click to a provider',
)
async def track_click(
	request: ClickRequest,
	background_tasks: BackgroundTasks,
	session: Annotated[ComparisonSession, Depends(get_session)],
) -> dict:
	background_tasks.add_task(session.track_click, request.provider_name)
	return {'status': 'accepted'}
