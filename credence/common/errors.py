# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class AppError(Exception):
    """异常统一

    错误处理层只认 code / status_code / details / message 这四个字段。
    details 原样透传，不做校验与脱敏，调用方不要塞敏感数据。
    """
    message: str
    code: str = "INTERNAL_ERROR"
    status_code: int = 500
    details: Optional[Any] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)


class ValidationError(AppError):
    def __init__(self, message: str, details: Any = None) -> None:
        super().__init__(message=message, code="VALIDATION_ERROR", status_code=400, details=details)


class UnauthorizedError(AppError):
    def __init__(self, message: str = "Unauthorized", details: Any = None) -> None:
        super().__init__(message=message, code="UNAUTHORIZED", status_code=401, details=details)


class ForbiddenError(AppError):
    def __init__(self, message: str = "Forbidden", details: Any = None) -> None:
        super().__init__(message=message, code="FORBIDDEN", status_code=403, details=details)


class NotFoundError(AppError):
    def __init__(self, message: str = "Not found", details: Any = None) -> None:
        super().__init__(message=message, code="NOT_FOUND", status_code=404, details=details)


class ConflictError(AppError):
    def __init__(self, message: str, details: Any = None) -> None:
        super().__init__(message=message, code="CONFLICT", status_code=409, details=details)


class UnprocessableError(AppError):
    def __init__(self, message: str, details: Any = None) -> None:
        super().__init__(message=message, code="UNPROCESSABLE", status_code=422, details=details)


def is_app_error(value: object) -> bool:
    return isinstance(value, AppError)
