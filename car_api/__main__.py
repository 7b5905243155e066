"""Run the Car API under uvicorn: ``python -m car_api``."""

import uvicorn

from car_api.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "car_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
