"""FastAPI application entry point."""

from academic_records.application import create_app
from academic_records.config import get_settings
from academic_records.utils.logging import setup_logging

# Setup logging before creating app
setup_logging()

# Create application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        "academic_records.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )
