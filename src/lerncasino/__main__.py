"""Run the API with uvicorn: ``python -m lerncasino``."""

import uvicorn

from lerncasino.config import get_settings
from lerncasino.main import create_app


def main() -> None:
    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
