"""Run the Status Service with uvicorn: ``python -m seyali.server``."""

import uvicorn

from seyali.core.logging_config import get_logger, setup_logging
from seyali.server.core.config import Settings
from seyali.server.main import create_app

logger = get_logger(__name__)


def main() -> None:
    settings = Settings()
    setup_logging(log_level=settings.log_level)

    app = create_app(settings)
    logger.info(f"Server running on port {settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
