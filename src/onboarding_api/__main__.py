"""Run the onboarding API with uvicorn."""

import uvicorn

from onboarding_api.config import get_settings
from onboarding_api.main import configure_logging


def main() -> None:
    """Start the API server."""
    settings = get_settings()
    configure_logging(settings.debug)
    uvicorn.run(
        "onboarding_api.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
