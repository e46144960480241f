import sys

from loguru import logger

from shared.config import Settings

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "[<cyan>{extra[request_id]}</cyan>] | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


def configure_logging(settings: Settings) -> None:
    logger.remove()
    # {extra[request_id]} must resolve outside of a request too
    logger.configure(extra={"request_id": "-"})
    logger.add(
        sys.stderr,
        level=settings.LOG_LEVEL.upper(),
        format=LOG_FORMAT,
        colorize=True,
        backtrace=False,
        diagnose=False,
    )
