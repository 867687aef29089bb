"""Minimal FastAPI application for the liquidation calculator.

Este módulo expone un endpoint de ping y el router de cálculo de
finiquitos y liquidaciones conforme a la LFT.
"""

import logging
import os

from fastapi import FastAPI
from pydantic import BaseModel

from app.api.v1.endpoints.liquidations import router as liquidations_router


logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)


class PingResponse(BaseModel):
    """Response model for the ping endpoint.

    Attributes:
        message: Human readable message.
        engine: Calculation engine status.
    """

    message: str
    engine: str


app: FastAPI = FastAPI(title=os.getenv("PROJECT_NAME", "Calculadora de Liquidaciones"))

app.include_router(liquidations_router, prefix="/api/v1/liquidations", tags=["Liquidaciones"])


@app.get("/ping", response_model=PingResponse)
async def ping() -> PingResponse:
    """Ping endpoint to validate the API is up.

    Returns:
        PingResponse: Object containing a simple ping/pong message and
        engine status.
    """

    return PingResponse(message="pong", engine="ok")
