from typing import Annotated

from fastapi import APIRouter, Depends, status

from api.dependencies import get_currency_service, get_provider_registry
from api.schemas import (
	CurrencyResponse,
	ProviderResponse,
	SampleCorridorResponse,
	SupportedCurrenciesResponse,
)
from application.services import CurrencyService, ProviderRegistry

router = APIRouter(prefix='/api', tags=['currency'])


@router.get(
	'/currencies',
	response_model=SupportedCurrenciesResponse,
	status_code=status.HTTP_200_OK,
	summary='List supported currencies',
)
async def get_supported_currencies(
	service: Annotated[CurrencyService, Depends(get_currency_service)],
) -> SupportedCurrenciesResponse:
	currencies = service.get_supported_currencies()
	return SupportedCurrenciesResponse(
		currencies=[CurrencyResponse.from_domain(c) for c in currencies]
	)


@router.get(
	'/corridors/samples',
	response_model=list[SampleCorridorResponse],
	status_code=status.HTTP_200_OK,
	summary='List sample corridors',
)
async def get_sample_corridors(
	service: Annotated[CurrencyService, Depends(get_currency_service)],
) -> list[SampleCorridorResponse]:
	return [
		SampleCorridorResponse.from_domain(index, sample)
		for index, sample in enumerate(service.get_sample_corridors())
	]


@router.get(
	'/providers',
	response_model=list[ProviderResponse],
	status_code=status.HTTP_200_OK,
	summary='List supported transfer providers',
)
async def get_supported_providers(
	registry: Annotated[ProviderRegistry, Depends(get_provider_registry)],
) -> list[ProviderResponse]:
	return [ProviderResponse.from_domain(d) for d in registry.descriptors]
