import logging

PACKAGE_LOGGER = "irmc_connector"

# silent unless the application configures logging
logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def configure_logging(level: int = logging.INFO) -> None:
    """
    Attach a stream handler to the root logger, once.
    Called by the application entry point, never on import.
    """
    root = logging.getLogger()

    if root.handlers:
        # host application already owns logging
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] %(levelname)-8s [%(name)s] %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    root.addHandler(handler)
    root.setLevel(level)


def setup_logger(name: str = PACKAGE_LOGGER) -> logging.Logger:
    return logging.getLogger(name)
