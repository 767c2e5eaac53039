import traceback

import uvicorn

from navigator.api.app import app
from navigator.core.logger import log_startup_info, logger, setupLogger
from navigator.core.models import settings


def run_with_uvicorn():
    """Run the server with uvicorn only"""
    config = uvicorn.Config(
        app,
        host=settings.FASTAPI_HOST,
        port=settings.FASTAPI_PORT,
        proxy_headers=True,
        forwarded_allow_ips="*",
        workers=settings.FASTAPI_WORKERS,
        log_config=None,
    )
    server = uvicorn.Server(config=config)

    setupLogger(settings.LOG_LEVEL)
    log_startup_info(settings)
    try:
        server.run()
    except KeyboardInterrupt:
        logger.log("NAVIGATOR", "Server stopped by user")
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        logger.exception(traceback.format_exc())
    finally:
        logger.log("NAVIGATOR", "Server Shutdown")


if __name__ == "__main__":
    run_with_uvicorn()
