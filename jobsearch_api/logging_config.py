import logging

FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: str = "INFO"):
    """Configure basic structured logging for the application.

    Called once by ``create_app`` with ``LOG_LEVEL``. A second call only
    changes the root level, so reloads never stack handlers.
    """
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=FORMAT)
    root.setLevel(level.upper())


def get_logger(name: str):
    return logging.getLogger(name)
