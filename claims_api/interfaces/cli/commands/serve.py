"""
Run the claims API with uvicorn.
"""

import argparse
from typing import Optional

import uvicorn

from claims_api.core.config import get_settings

from .base import BaseCommand


class Command(BaseCommand):
    name = "serve"
    description = "Start the claims API server"

    def add_arguments(self, parser: argparse.ArgumentParser):
        parser.add_argument("--host", default=None, help="Bind host (default from settings)")
        parser.add_argument("--port", type=int, default=None, help="Bind port (default from settings)")
        parser.add_argument("--reload", action="store_true", help="Reload on code changes")

    def handle(self, host: Optional[str] = None, port: Optional[int] = None, reload: bool = False, **kwargs) -> int:
        settings = get_settings()
        uvicorn.run(
            "claims_api.main:app",
            host=host or settings.HOST,
            port=port or settings.PORT,
            reload=reload or settings.DEBUG,
            log_level="debug" if settings.DEBUG else "info",
            server_header=False,
        )
        return 0
