import logging

import uvicorn

from .config import Settings
from .main import create_app


def main():
    settings = Settings.from_env()
    logging.basicConfig(format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                        level=settings.log_level)
    logger = logging.getLogger("mockapi")
    logger.info("Mock API server running at http://%s:%d", settings.host, settings.port)
    uvicorn.run(create_app(settings=settings), host=settings.host, port=settings.port,
                log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
