import logging

from src.api.deps import Settings

logger = logging.getLogger(__name__)


def validate_shell_config(settings: Settings) -> None:
    """
    Validate operational requirements before startup.

    Production must have a front-end build to serve. Development only
    warns, since the shell answers 500 until a build exists.
    """
    index_path = settings.build_dir / "index.html"
    if index_path.is_file():
        logger.info("Serving front-end build from %s", settings.build_dir)
        return

    if settings.is_production:
        raise RuntimeError(
            f"Could not find the build directory: {settings.build_dir}, "
            "make sure to build the client first"
        )

    logger.warning("No front-end build at %s; page requests will fail", settings.build_dir)
