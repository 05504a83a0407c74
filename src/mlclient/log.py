# -*- coding: utf-8 -*-
#
# Copyright (C) 2015-2026 Dubalu LLC. All rights reserved.
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in
# all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN
# THE SOFTWARE.
#
"""Logging setup for mlclient.

Importing mlclient never touches logging configuration. Applications that
want mlclient's output formatted call ``init_logging`` once from their
entry point:

    >>> from mlclient.log import init_logging
    >>> init_logging(level=logging.DEBUG, performance_file='performance.log')

Timings of the parsing and extraction functions go to the
``mlclient.performance`` logger at ``DEBUG`` level, one line per call.
"""
from __future__ import annotations

import time
import logging
import functools
from collections.abc import Callable
from typing import Any


LOGGER_NAME = 'mlclient'
PERFORMANCE_LOGGER_NAME = 'mlclient.performance'
LOG_FORMAT = '%(asctime)s %(levelname)s %(filename)s:%(lineno)d %(message)s'

logger = logging.getLogger(LOGGER_NAME)
performance_logger = logging.getLogger(PERFORMANCE_LOGGER_NAME)

_initialized = False


def init_logging(level: int = logging.INFO, performance_file: str | None = None,
        fmt: str = LOG_FORMAT) -> logging.Logger:
    """Install mlclient's log handlers.

    Calling it again is a no-op, so the first caller decides the
    configuration.

    Args:
        level: Level set on the ``mlclient`` logger.
        performance_file: If given, timing lines are written to this file
            as bare messages, and are not propagated to ``mlclient``.
        fmt: Format used by the ``mlclient`` stream handler.

    Returns:
        logging.Logger: The ``mlclient`` logger.
    """
    global _initialized
    if _initialized:
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(handler)
    logger.setLevel(level)

    if performance_file is not None:
        perf_handler = logging.FileHandler(performance_file)
        perf_handler.setFormatter(logging.Formatter('%(message)s'))
        performance_logger.addHandler(perf_handler)
        performance_logger.setLevel(logging.DEBUG)
        performance_logger.propagate = False

    _initialized = True
    return logger


def timed(func: Callable[..., Any]) -> Callable[..., Any]:
    """Log the wall-clock duration of each call to ``func``."""
    name = func.__qualname__

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        if not performance_logger.isEnabledFor(logging.DEBUG):
            return func(*args, **kwargs)
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            performance_logger.debug(f"{name} {time.perf_counter() - start:.6f}")

    return wrapper
