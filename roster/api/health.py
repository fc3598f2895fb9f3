"""Health endpoint for load balancers: 200 when the database answers, 503 otherwise."""

from fastapi import APIRouter, Response, status

from roster.api.deps import DbDep
from roster.core.config import settings
from roster.core.database import check_db_connected
from roster.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def get_health(db: DbDep, response: Response) -> HealthResponse:
    health = HealthResponse.from_check(settings.APP_ENV, check_db_connected(db))
    if not health.healthy:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return health
