import os
import logging

CONSOLE_LEVEL = logging.INFO
_console_handlers = []
_file_handlers = {}
FORMATTER = logging.Formatter(
   "%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def get_logger(name, filename=None):
    """
    Create a logger with the specified name and optional filename.

    Loggers are cached by name, so asking for the same name twice does not
    attach a second pair of handlers. Loggers that name the same filename
    share one FileHandler.

    Args:
        name (str): The name of the logger.
        filename (str, optional): The filename for the log file. Defaults to None.

    Returns:
        logger (logging.Logger): A configured logger instance.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    logger.setLevel(logging.DEBUG)
    if not os.path.exists("Logs"):
        os.makedirs("Logs", exist_ok=True)
    log_file = os.path.abspath(f"Logs/{filename if filename else name}.log")
    fh = _file_handlers.get(log_file)
    if fh is None:
        fh = logging.FileHandler(log_file)
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(FORMATTER)
        _file_handlers[log_file] = fh
    ch = logging.StreamHandler()
    ch.setLevel(CONSOLE_LEVEL)
    ch.setFormatter(FORMATTER)
    # add the handlers to the logger
    logger.addHandler(fh)
    logger.addHandler(ch)
    _console_handlers.append(ch)
    return logger


def set_console_level(level):
    """
    Change the console verbosity of every logger created by get_logger.

    The log files keep recording at DEBUG regardless.

    Args:
        level (int): A logging level, e.g. logging.WARNING for --quiet.
    """
    global CONSOLE_LEVEL
    CONSOLE_LEVEL = level
    for handler in _console_handlers:
        handler.setLevel(level)
