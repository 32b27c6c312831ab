import sys
import traceback
from typing import Any

from uvicorn.server import logger

from tgtypes.util.config import config

_LEVELS = {"trace": 0, "debug": 1, "info": 2, "warn": 3, "warning": 3, "error": 4}


def _should_log(level: str) -> bool:
    if config.log_level == "local":
        return True  # local runs print everything
    current_level = _LEVELS.get(config.log_level, 2)
    return _LEVELS.get(level.lower(), 2) >= current_level


def _describe(arg: Any) -> str:
    # pydantic models and other objects print their repr in a fenced block
    if hasattr(arg, "__dict__") and not isinstance(arg, type):
        return f"{type(arg).__name__}:\n```\n{arg!r}\n```"
    return str(arg)


def _format_args(*args: Any) -> tuple[str, list[Exception]]:
    exceptions = [arg for arg in args if isinstance(arg, Exception)]
    parts = [
        f"! {type(arg).__name__} (see below)" if isinstance(arg, Exception) else _describe(arg)
        for arg in args
    ]
    if not parts:
        return "", exceptions
    if len(parts) == 1:
        return parts[0], exceptions
    if exceptions:
        return "\n ├─ ".join(parts), exceptions
    return "\n ├─ ".join(parts[:-1]) + f"\n └─ {parts[-1]}", exceptions


def _trace_of(exception: Exception) -> str | None:
    if not exception.__traceback__:
        return None
    return "".join(traceback.format_tb(exception.__traceback__)).strip()


def _print_locally(level: str, message: str, exceptions: list[Exception]):
    if _should_log(level):
        print(f"[{level[0]}] {message}")
    for exception in exceptions:
        print(f" ‼  Message: {exception}", file = sys.stderr)
        if trace := _trace_of(exception):
            print(trace, file = sys.stderr)


def _log_message(level: str, message: str, exceptions: list[Exception]) -> str:
    if not _should_log(level) and not exceptions:
        return message
    if config.log_level == "local":
        _print_locally(level, message, exceptions)
        return message

    try:
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
            logger.error(f"Message: {exception}")
            if trace := _trace_of(exception):
                logger.error(f"Details:\n └─ {trace}")
    except Exception:
        # the server logger is not usable outside of a running server in some setups
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
