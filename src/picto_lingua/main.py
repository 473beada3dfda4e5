"""Command-line entrypoint that serves the API with uvicorn."""

import uvicorn

from picto_lingua.app_logging import configure_logging
from picto_lingua.config import Settings


def main() -> None:
    """Run the API server on the configured port."""
    settings = Settings()
    configure_logging()
    uvicorn.run(
        "picto_lingua.api.asgi:app",
        host="0.0.0.0",  # noqa: S104
        port=settings.port,
    )


if __name__ == "__main__":
    main()
