# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

import uuid
from contextvars import ContextVar
from typing import Optional


REQUEST_ID_HEADER = "X-Request-Id"

_request_id_ctx: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


def new_request_id() -> str:
    return str(uuid.uuid4())


def resolve_request_id(incoming: Optional[str]) -> str:
    """调用方传入的 id 去掉首尾空白后非空则沿用，否则新生成"""
    if incoming is not None:
        incoming = incoming.strip()
        if incoming:
            return incoming
    return new_request_id()


def set_request_id(request_id: Optional[str]) -> None:
    _request_id_ctx.set(request_id or None)


def get_request_id() -> Optional[str]:
    return _request_id_ctx.get()
