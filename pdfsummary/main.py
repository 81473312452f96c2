import sys

import uvicorn
from pydantic import ValidationError

from pdfsummary.api.app import create_app
from pdfsummary.config.settings import Settings
from pdfsummary.logging.logger import Log


def load_settings() -> Settings:
    """Load settings, exiting the process if required variables are missing."""
    try:
        return Settings()
    except ValidationError as exc:
        Log.configure("INFO")
        missing = sorted({str(err["loc"][0]).upper() for err in exc.errors() if err["loc"]})
        Log.error(f"Missing or invalid required environment variables: {', '.join(missing)}")
        sys.exit(1)


def main() -> None:
    """Entry point: load settings -> build app -> serve."""
    settings = load_settings()
    Log.configure(settings.log_level)

    app = create_app(settings)
    Log.info(f"Server running on port {settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
