import logging
import logging.handlers
from pathlib import Path

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-15s | %(funcName)-20s | %(message)s"


def setup_logging(log_level: str = "INFO", log_dir: Path = None):
    """Configure the root logger once per process.

    Streamlit re-executes the app script on every interaction, so handlers are
    only attached when the root logger has none yet.
    """
    logger = logging.getLogger()
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    if logger.handlers:
        return logger

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    log_dir = log_dir or Path(__file__).parent.parent / "logs"
    log_dir.mkdir(exist_ok=True)
    # 1 MB x 3 files
    file_handler = logging.handlers.RotatingFileHandler(
        log_dir / "app.log",
        maxBytes=1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(formatter)

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.info("Logging initialised (level=%s)", log_level.upper())
    return logger
