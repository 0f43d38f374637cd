"""Run the real-ip service with uvicorn: ``python -m realip``."""

import uvicorn

from realip.app import create_app
from realip.configs.config import get_app_config
from realip.infra.logging import setup_logging


def main() -> None:
    config = get_app_config()
    setup_logging(config.logging)
    uvicorn.run(
        create_app(config),
        host=config.server.host,
        port=config.server.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
