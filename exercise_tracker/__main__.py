"""Process entry point: ``python -m exercise_tracker`` / ``exercise-tracker``."""

import uvicorn

from exercise_tracker.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "exercise_tracker.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
