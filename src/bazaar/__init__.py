"""bazaar - spare-parts marketplace client."""

import logging

LOGGER_NAME = "bazaar"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the package logger, or a child of it when ``name`` is given."""
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "[%(asctime)s] %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.WARNING)
    if name:
        return logger.getChild(name)
    return logger


# Import main lazily to avoid circular dependencies
def __getattr__(name):
    if name == "main":
        from bazaar.cli.main import main
        return main
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
