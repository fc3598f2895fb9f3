"""Response model for GET /health."""

from typing import Literal

from pydantic import BaseModel, Field

DatabaseStatus = Literal["connected", "disconnected"]


class HealthResponse(BaseModel):
    """Process liveness plus the result of a SELECT 1 against the users database."""

    status: Literal["ok", "degraded"] = Field(
        default="ok", description="'degraded' when the database cannot be reached"
    )
    environment: Literal["dev", "prod"]
    database: DatabaseStatus

    @classmethod
    def from_check(cls, environment: str, db_connected: bool) -> "HealthResponse":
        return cls(
            status="ok" if db_connected else "degraded",
            environment=environment,
            database="connected" if db_connected else "disconnected",
        )

    @property
    def healthy(self) -> bool:
        return self.status == "ok"
