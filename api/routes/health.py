from typing import Annotated

from fastapi import APIRouter, Depends

from api.dependencies import get_session
from api.schemas import HealthResponse
from application.services import ConverterSession

router = APIRouter(tags=['health'])


@router.get('/health', response_model=HealthResponse, summary='Rate freshness check')
async def health_check(session: Annotated[ConverterSession, Depends(get_session)]) -> HealthResponse:
	"""Reports ``degraded`` while any currency is still waiting for its first rate."""
	missing = [entry.code for entry in session.get_available_currencies() if entry.rate == 0]
	return HealthResponse(
		status='degraded' if missing else 'healthy',
		is_loading=session.is_loading(),
		rates_updated_at=session.rate_table.updated_at,
		missing_rates=missing,
	)
