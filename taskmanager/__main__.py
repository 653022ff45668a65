"""Run the Task Management API with ``python -m taskmanager``."""

import uvicorn

from taskmanager.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "taskmanager.api.app:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
