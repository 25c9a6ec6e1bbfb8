# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

"""日志初始化

每条日志都带 trace=<request id>：优先取调用方 extra={"request_id": ...} 传入的值，
其次取当前请求上下文里的 id，都没有时为 "-"。
"""

from __future__ import annotations

import logging
from typing import Iterable, Union

from credence.common.trace import get_request_id


LOG_FORMAT = "[%(asctime)s - %(levelname)s - trace=%(request_id)s - %(name)s - %(message)s]"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# 这些 logger 交给 root 统一输出，格式里才能带上 request id
_PROPAGATED_LOGGERS = ("uvicorn", "uvicorn.error")
_QUIET_LOGGERS = ("uvicorn.access",)


class RequestIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        if not getattr(record, "request_id", None):
            record.request_id = get_request_id() or "-"
        return True


def resolve_level(level: Union[int, str]) -> int:
    """"debug" / "WARNING" / 10 都可以；无法识别时按 INFO"""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def build_handler() -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    handler.addFilter(RequestIdFilter())
    return handler


def _ensure_filter(handlers: Iterable[logging.Handler]) -> None:
    for h in handlers:
        if not any(isinstance(f, RequestIdFilter) for f in h.filters):
            h.addFilter(RequestIdFilter())


def setup_logging(level: Union[int, str] = logging.INFO) -> None:
    """初始化全局日志（可重复调用，不会重复挂 handler）"""

    root = logging.getLogger()
    root.setLevel(resolve_level(level))

    if not root.handlers:
        root.addHandler(build_handler())
    # 外部已挂的 handler（如测试框架的）也补上 filter，避免格式里缺字段
    _ensure_filter(root.handlers)

    for name in _PROPAGATED_LOGGERS:
        uv = logging.getLogger(name)
        uv.handlers.clear()
        uv.propagate = True

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
