"""FastAPI application exposing code extraction over HTTP."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from fastapi import FastAPI

from otpextract import __version__
from otpextract.app.models import ExtractRequest, ExtractResponse, HealthState
from otpextract.core.settings import ExtractorSettings
from otpextract.services import OtpReader
from otpextract.utils.logging import get_logger, set_level


logger = get_logger("ExtractAPI")


def load_settings(path: Optional[Path]) -> ExtractorSettings:
    if path is None or not path.exists():
        if path is not None:
            logger.warning("Settings file %s not found; using defaults", path)
        return ExtractorSettings()
    return ExtractorSettings.from_file(path)


def create_app(settings: Optional[ExtractorSettings] = None) -> FastAPI:
    settings = settings or ExtractorSettings()
    set_level("CodeExtractor", settings.log_level_number)
    reader = OtpReader(settings.rules, default_limit=settings.default_limit)

    app = FastAPI(title="OTP Extract")

    @app.get("/health", response_model=HealthState)
    async def health() -> HealthState:
        return HealthState(status="ok", version=__version__)

    @app.post("/extract", response_model=ExtractResponse)
    def extract_codes(payload: ExtractRequest) -> ExtractResponse:
        codes = reader.top(payload.text, payload.limit)
        return ExtractResponse(codes=codes, best=codes[0].value if codes else None)

    return app


# Default ASGI app when run via `uvicorn otpextract.app.main:app` with env OTPEXTRACT_CONFIG

config_env = os.getenv("OTPEXTRACT_CONFIG")
app = create_app(load_settings(Path(config_env) if config_env else None))
