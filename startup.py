import logging
import os
import sys

import uvicorn

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)

# Add the src directory to Python path
current_dir = os.path.dirname(os.path.abspath(__file__))
src_path = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)


def main() -> None:
    from pydantic import ValidationError as SettingsValidationError

    from hearingclinic.core.config import get_settings

    try:
        settings = get_settings()
    except SettingsValidationError as settings_error:
        logger.error(f"Invalid configuration: {settings_error}")
        logger.error("Check APP_ENV, PORT, LOG_LEVEL, LOG_FORMAT and AUX_* variables")
        sys.exit(1)

    host = settings.host
    port = settings.port
    logger.info(f"Starting uvicorn server on {host}:{port} ({settings.app_env})")
    try:
        uvicorn.run(
            "hearingclinic.app:app",
            host=host,
            port=port,
            workers=1,
            log_level=settings.logging.level.lower(),
            access_log=True,
        )
    except KeyboardInterrupt:
        logger.info("Shutting down due to keyboard interrupt")
        sys.exit(0)


if __name__ == "__main__":
    main()
