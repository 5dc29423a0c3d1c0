"""Run the API server: ``python -m f1calendar``."""

from __future__ import annotations

import logging

import uvicorn

from f1calendar.app import create_app
from f1calendar.config import Settings

logger = logging.getLogger("f1calendar")

ROUTES = [
    ("Calendário", "GET /api/calendar/:year"),
    ("Pilotos", "GET /api/drivers/:year"),
    ("Equipes", "GET /api/constructors/:year"),
    ("Classificação Pilotos", "GET /api/standings/drivers/:year"),
    ("Classificação Equipes", "GET /api/standings/constructors/:year"),
]


def main() -> None:
    settings = Settings.from_env()
    app = create_app(settings)

    logger.info("F1 Calendar API rodando em http://%s:%d", settings.host, settings.port)
    for label, route in ROUTES:
        logger.info("  %s: %s", label, route)

    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
