"""Process entry point — `python -m focustools` or the `focustools` script."""

import uvicorn

from focustools.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "focustools.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
