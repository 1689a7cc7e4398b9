"""Command-line entry point that serves the photo API."""

import uvicorn

from photo_share.api.app import create_app
from photo_share.config import Settings
from photo_share.containers import build_container


def main() -> None:
    """Start the HTTP listener and block until terminated."""
    settings = Settings()
    app = create_app(build_container(settings))
    print(f"Playground: {settings.playground_url}")
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
