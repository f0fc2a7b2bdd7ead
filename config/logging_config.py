import logging

from config.settings import settings


def setup_logging():
    """
    Sets up logging configuration for the application.
    This function configures a named logger that writes to the console. The level
    comes from the LOG_LEVEL setting and messages include the timestamp,
    logger name, log level, and the message.
    Returns:
        logging.Logger: Configured logger instance for the application.
    """
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    # Create logger
    logger = logging.getLogger('kb-connectors')
    logger.setLevel(level)

    if not logger.handlers:
        # Create console handler
        ch = logging.StreamHandler()
        ch.setLevel(level)

        # Create formatter
        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        ch.setFormatter(formatter)

        # Add handler to logger
        logger.addHandler(ch)

    return logger

logger = setup_logging()
