import logging
import os


def setup_logging(out_dir: str = None, level: str = 'INFO', filename: str = 'run.log') -> logging.Logger:
    """Configure the package logger for the console and, with ``out_dir``, a run log file."""
    level_num = getattr(logging, str(level).upper(), logging.INFO)

    fmt = logging.Formatter('%(asctime)s [%(levelname)s] %(message)s')

    logger = logging.getLogger('gpx_cleaner')
    logger.setLevel(level_num)
    logger.handlers.clear()

    if out_dir is not None:
        os.makedirs(out_dir, exist_ok=True)
        file_handler = logging.FileHandler(os.path.join(out_dir, filename))
        file_handler.setFormatter(fmt)
        logger.addHandler(file_handler)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(fmt)
    logger.addHandler(stream_handler)
    return logger
