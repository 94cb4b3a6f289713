import sys

from loguru import logger

from colmeta import data

__all__ = ("configure",)


def configure(*, config: data.Config) -> None:
    logger.remove()
    logger.add(sys.stderr, level=config.log_level)

    if config.log_folder is not None:
        config.log_folder.mkdir(parents=True, exist_ok=True)
        logger.add(config.log_folder / "error.log", rotation="5 MB", retention="7 days", level="ERROR")
