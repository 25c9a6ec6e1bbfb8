# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from fastapi import APIRouter

from credence.common.errors import NotFoundError


# 必须最后注册：前面的路由都没匹配上才会落到这里
router = APIRouter(include_in_schema=False)

_ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD", "TRACE", "CONNECT"]


@router.api_route("/{path:path}", methods=_ALL_METHODS)
def not_found(path: str) -> None:  # noqa: ARG001
    raise NotFoundError("Not found")
