from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from api.dependencies import get_session
from api.schemas import CurrenciesResponse, CurrencyResponse, DisplayResponse, RefreshResponse
from application.services import ConverterSession

router = APIRouter(prefix='/api', tags=['converter'])

Session = Annotated[ConverterSession, Depends(get_session)]
CurrencyCode = Annotated[str, Path(min_length=3, max_length=5)]


@router.get(
	'/display',
	response_model=DisplayResponse,
	status_code=status.HTTP_200_OK,
	summary='Current keypad entry and converted amount',
)
async def get_display(session: Session) -> DisplayResponse:
	return DisplayResponse.from_session(session)


@router.post(
	'/keys/{key}',
	response_model=DisplayResponse,
	status_code=status.HTTP_200_OK,
	summary='Press one keypad key',
)
async def press_key(
	key: Annotated[str, Path(min_length=1, max_length=16)],
	session: Session,
) -> DisplayResponse:
	session.on_key(key)
	return DisplayResponse.from_session(session)


@router.get(
	'/currencies',
	response_model=CurrenciesResponse,
	status_code=status.HTTP_200_OK,
	summary='List available currencies',
)
async def get_currencies(session: Session) -> CurrenciesResponse:
	return CurrenciesResponse(
		currencies=[CurrencyResponse.from_entry(entry) for entry in session.get_available_currencies()]
	)


@router.put(
	'/selection/from/{code}',
	response_model=DisplayResponse,
	status_code=status.HTTP_200_OK,
	summary='Select the source currency',
)
async def select_from(code: CurrencyCode, session: Session) -> DisplayResponse:
	session.select_from(code)
	return DisplayResponse.from_session(session)


@router.put(
	'/selection/to/{code}',
	response_model=DisplayResponse,
	status_code=status.HTTP_200_OK,
	summary='Select the target currency',
)
async def select_to(code: CurrencyCode, session: Session) -> DisplayResponse:
	session.select_to(code)
	return DisplayResponse.from_session(session)


@router.post(
	'/selection/swap',
	response_model=DisplayResponse,
	status_code=status.HTTP_200_OK,
	summary='Swap source and target currencies',
)
async def swap_selection(session: Session) -> DisplayResponse:
	session.swap()
	return DisplayResponse.from_session(session)


@router.post(
	'/rates/refresh',
	response_model=RefreshResponse,
	status_code=status.HTTP_200_OK,
	summary='Fetch the latest rates now',
)
async def refresh_rates(session: Session) -> RefreshResponse:
	applied = await session.refresh_rates()
	return RefreshResponse(applied=applied, display=DisplayResponse.from_session(session))
