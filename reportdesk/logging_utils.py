"""
Логирование ReportDesk.

Один корневой логгер "reportdesk" с хендлерами; компоненты пишут в дочерние
логгеры (reportdesk.transport, reportdesk.documents), записи всплывают к корню.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from reportdesk import config

ROOT_LOGGER = "reportdesk"

CONSOLE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s (%(threadName)s): %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(component: str | None = None) -> logging.Logger:
    """get_logger("transport") → логгер "reportdesk.transport"; без аргумента корневой."""
    if not component:
        return logging.getLogger(ROOT_LOGGER)
    return logging.getLogger(f"{ROOT_LOGGER}.{component}")


def _drop_handlers(logger: logging.Logger) -> None:
    # закрываем, иначе файл лога остаётся открытым после повторной настройки
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()


def setup_logging(  # noqa: PLR0913
    *,
    enabled: bool = True,
    debug: bool = False,
    logger_name: str = ROOT_LOGGER,
    file_path: str | None = config.LOG_FILE,
    max_bytes: int | None = None,
    backups: int | None = None,
) -> logging.Logger:
    """
    Настраивает логгер приложения.
    - enabled=False: только NullHandler, уровень WARNING (или DEBUG при debug=True).
    - enabled=True: в консоль идут WARNING и выше (при debug=True всё подряд),
      в файл с ротацией пишется полный журнал от INFO (или DEBUG).
    - max_bytes/backups не заданы: берём LOG_MAX_BYTES/LOG_BACKUPS из config в момент вызова.
    """
    logger = logging.getLogger(logger_name)
    _drop_handlers(logger)

    level = logging.DEBUG if debug else logging.INFO
    if not enabled:
        logger.setLevel(logging.DEBUG if debug else logging.WARNING)
        logger.addHandler(logging.NullHandler())
        return logger

    logger.setLevel(level)

    console = logging.StreamHandler()
    console.setLevel(level if debug else logging.WARNING)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT, DATE_FORMAT))
    logger.addHandler(console)

    if file_path:
        Path(file_path).parent.mkdir(parents=True, exist_ok=True)
        fh = RotatingFileHandler(
            file_path,
            maxBytes=config.LOG_MAX_BYTES if max_bytes is None else max_bytes,
            backupCount=config.LOG_BACKUPS if backups is None else backups,
            encoding="utf-8",
        )
        fh.setLevel(level)
        fh.setFormatter(logging.Formatter(FILE_FORMAT, DATE_FORMAT))
        logger.addHandler(fh)

    logger.debug("logging_ready file=%s debug=%s", file_path or "-", debug)
    return logger
