import logging

from app.core.config import settings


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    # IMPORTANT: never log code or review text; log only IDs/counts.
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
