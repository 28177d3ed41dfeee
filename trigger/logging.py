import os
import sys
from typing import List, Optional

from loguru import logger

CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"


def setup_logging(debug_mode: bool = True, log_dir: Optional[str] = None) -> List[int]:
    """
    Configures Loguru sinks for trigger and its host.

    Args:
        debug_mode: DEBUG on the console when true, INFO otherwise
        log_dir: Directory for a rotating DEBUG log file; no file when None

    Returns:
        Ids of the sinks added, for ``logger.remove``
    """
    logger.remove()
    sink_ids = [logger.add(sys.stderr, level="DEBUG" if debug_mode else "INFO", format=CONSOLE_FORMAT)]

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        sink_ids.append(logger.add(os.path.join(log_dir, "trigger_{time}.log"), rotation="10 MB", retention="1 week", level="DEBUG"))

    logger.info(f"Logging initialized (debug={debug_mode}, log_dir={log_dir})")
    return sink_ids
