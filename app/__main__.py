"""Run the API with uvicorn: ``python -m app``."""

import uvicorn

from app.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,  # keep the structlog handlers installed by create_app
    )


if __name__ == "__main__":
    main()
