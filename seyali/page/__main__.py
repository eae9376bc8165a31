"""Run the Status Page with uvicorn: ``python -m seyali.page``."""

import uvicorn

from seyali.core.logging_config import get_logger, setup_logging
from seyali.page.config import PageSettings
from seyali.page.main import create_app

logger = get_logger(__name__)


def main() -> None:
    settings = PageSettings()
    setup_logging(log_level=settings.log_level)

    app = create_app(settings)
    logger.info(f"Status Page running on port {settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
