import sys
import traceback
from typing import Any

from uvicorn.server import logger

from util.config import config

LEVELS = {"trace": 0, "debug": 1, "info": 2, "warn": 3, "warning": 3, "error": 4}


def _should_log(level: str) -> bool:
    if config.log_level == "local":
        return True  # local runs always print everything
    current_level = LEVELS.get(config.log_level, 2)
    return LEVELS.get(level.lower(), 2) >= current_level


def _describe(arg: Any) -> str:
    if isinstance(arg, Exception):
        return f"! {type(arg).__name__} (see below)"
    if isinstance(arg, (bytes, bytearray)):
        return f"<{len(arg)} bytes>"
    if hasattr(arg, "__dict__"):
        return f"{type(arg).__name__}:\n```\n{repr(arg)}\n```"
    return str(arg)


def _format_args(*args: Any) -> tuple[str, list[Exception]]:
    exceptions = [arg for arg in args if isinstance(arg, Exception)]
    parts = [_describe(arg) for arg in args]
    if len(parts) <= 1:
        return (parts[0] if parts else ""), exceptions
    if exceptions:
        # the tree stays open, exception details follow below it
        return "\n ├─ ".join(parts), exceptions
    return "\n ├─ ".join(parts[:-1]) + f"\n └─ {parts[-1]}", exceptions


def _trace_of(exception: Exception) -> str | None:
    trace = exception.__traceback__
    if not trace:
        return None
    return "".join(traceback.format_tb(trace)).strip()


def _print_locally(level: str, message: str, exceptions: list[Exception]):
    if _should_log(level):
        print(f"[{level[0]}] {message}")
    for exception in exceptions:
        print(f" ‼  Message: {str(exception)}", file = sys.stderr)
        if trace := _trace_of(exception):
            print(trace, file = sys.stderr)


def _send_to_logger(level: str, message: str, exceptions: list[Exception]):
    if _should_log(level):
        match level:
            case "TRACE" | "DEBUG":
                logger.debug(message)
            case "INFO":
                logger.info(message)
            case "WARN":
                logger.warning(message)
            case "ERROR":
                logger.error(message)
    for exception in exceptions:
        logger.error(f"Message: {str(exception)}")
        if trace := _trace_of(exception):
            logger.error(f"Details:\n └─ {trace}")


def _log_message(level: str, message: str, exceptions: list[Exception]) -> str:
    if not _should_log(level) and not exceptions:
        return message
    if config.log_level == "local":
        _print_locally(level, message, exceptions)
        return message
    try:
        _send_to_logger(level, message, exceptions)
    except Exception:
        _print_locally(level, message, exceptions)
    return message


def t(*args: Any) -> str:
    message, exceptions = _format_args(*args)
    return _log_message("TRACE", message, exceptions)


def d(*args: Any) -> str:
    message, exceptions = _format_args(*args)
    return _log_message("DEBUG", message, exceptions)


def i(*args: Any) -> str:
    message, exceptions = _format_args(*args)
    return _log_message("INFO", message, exceptions)


def w(*args: Any) -> str:
    message, exceptions = _format_args(*args)
    return _log_message("WARN", message, exceptions)


def e(*args: Any) -> str:
    message, exceptions = _format_args(*args)
    return _log_message("ERROR", message, exceptions)
