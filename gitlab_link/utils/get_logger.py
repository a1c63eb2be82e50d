import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name.

    Handlers are installed once at the application entry point by configure_logging().
    """
    return logging.getLogger(f"gitlab_link.{name}")
