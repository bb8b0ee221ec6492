"""Run the API with uvicorn: `python -m hotel_api`."""

import uvicorn

from hotel_api.config import settings


def main() -> None:
    uvicorn.run(
        "hotel_api.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,  # setup_logging() in the lifespan owns logging
    )


if __name__ == "__main__":
    main()
