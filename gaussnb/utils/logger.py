#!filepath: gaussnb/utils/logger.py
from __future__ import annotations

import os
import sys
from functools import wraps
from time import perf_counter
from typing import Callable, Optional

from loguru import logger

from gaussnb.config.log_config import LogConfig


class Logging:
    """
    Library logger
    ---------------------------------------
    - thin wrapper over the global loguru logger
    - stderr only until init_logging() installs a file sink
    - file sink: daily rotation + retention
    - function-level decorator (exceptions / timing)
    ---------------------------------------
    """

    def __init__(self, cfg: Optional[LogConfig] = None):
        self.cfg = cfg
        self._file_sink_id: Optional[int] = None

        if cfg is not None:
            self._configure(cfg)

    def _configure(self, cfg: LogConfig) -> None:
        """
        Replace all sinks: stderr at cfg.level + rotating file sink.
        """
        logger.remove()

        logger.add(sys.stderr, level=cfg.level)

        os.makedirs(cfg.dir, exist_ok=True)
        self._file_sink_id = logger.add(
            sink=f"{cfg.dir}/gaussnb_{{time:YYYY-MM-DD}}.log",
            rotation=cfg.rotation,
            retention=cfg.retention,
            level=cfg.level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}",
            enqueue=True,  # multi-process safe
            backtrace=True,
            diagnose=False,
        )

        logger.info("-----------gaussnb logger initialized-----------")

    # ---------- basic interface ----------
    def debug(self, msg: str, *args, **kwargs):
        logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        logger.error(msg, *args, **kwargs)

    def exception(self, msg: str, *args, **kwargs):
        logger.exception(msg, *args, **kwargs)

    # ---------- decorator ----------
    def catch(
        self,
        msg: str = "Exception occurred",
        log_time: bool = True,
    ) -> Callable:
        """
        Log (and re-raise) exceptions of the wrapped function,
        optionally with its wall time at DEBUG level.
        """

        def decorator(func: Callable):
            @wraps(func)
            def wrapper(*args, **kwargs):
                start = perf_counter()

                try:
                    result = func(*args, **kwargs)
                except Exception:
                    logger.exception(f"[ERROR] {func.__qualname__}: {msg}")
                    raise

                if log_time:
                    cost = perf_counter() - start
                    logger.debug(f"[TIME] {func.__qualname__} took {cost:.4f}s")

                return result

            return wrapper

        return decorator


def init_logging(cfg: LogConfig) -> Logging:
    """
    Install the configured sinks and rebind the module-level `logs`.
    """
    global logs
    logs = Logging(cfg)
    return logs


# default global logs (replaced by init_logging)
logs = Logging()
