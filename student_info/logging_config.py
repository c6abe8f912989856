"""
Logging setup shared by the student service, the college service and
the demo client.
"""

import logging


def setup_logging(level: str = "INFO") -> None:
    """Attach a console handler to the root logger and set its level.

    If the root logger already has handlers (tests, several
    ``create_app`` invocations) nothing is changed.
    """
    logger = logging.getLogger()
    if logger.handlers:
        return

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
