"""Run the API with uvicorn: ``python -m bistro``."""

import uvicorn

from bistro.config import settings


def main() -> None:
    uvicorn.run(
        "bistro.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_config=None,
    )


if __name__ == "__main__":
    main()
