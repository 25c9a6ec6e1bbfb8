# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

import os

# 测试环境下入口不监听端口
os.environ.setdefault("NODE_ENV", "test")

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from credence.common.errors import (
    AppError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    UnauthorizedError,
    UnprocessableError,
    ValidationError,
)
from credence.common.exception_handlers import ErrorHandler
from credence.main import register_error_handling


class UnprintableError(Exception):
    def __str__(self) -> str:
        raise RuntimeError("str() is broken")


class RecordingLogger:
    """记录 warning / error 调用，替代真实 logger"""

    def __init__(self) -> None:
        self.calls = []

    def warning(self, msg, *args, **kwargs) -> None:
        self.calls.append(("warning", msg % args, kwargs))

    def error(self, msg, *args, **kwargs) -> None:
        self.calls.append(("error", msg % args, kwargs))

    def levels(self):
        return [level for level, _, _ in self.calls]


def build_error_app(handler: ErrorHandler | None = None) -> FastAPI:
    app = FastAPI()
    register_error_handling(app, handler)

    @app.get("/ok")
    def ok() -> dict:
        return {"ok": True}

    @app.get("/400")
    def bad_request() -> None:
        raise ValidationError("Invalid input", {"field": "email"})

    @app.get("/401")
    def unauthorized() -> None:
        raise UnauthorizedError("Missing or invalid token")

    @app.get("/403")
    def forbidden() -> None:
        raise ForbiddenError("Insufficient permissions")

    @app.get("/404")
    def not_found() -> None:
        raise NotFoundError("Resource not found")

    @app.get("/409")
    def conflict() -> None:
        raise ConflictError("Address already bonded", {"address": "GABC"})

    @app.get("/422")
    def unprocessable() -> None:
        raise UnprocessableError("Bond amount below minimum")

    @app.get("/500-unknown")
    def unknown() -> None:
        raise RuntimeError("Internal implementation detail")

    @app.get("/500-unprintable")
    def unprintable() -> None:
        raise UnprintableError("hidden")

    @app.get("/500-app")
    def app_500() -> None:
        raise AppError("Server misconfiguration", status_code=500)

    @app.get("/items/{item_id}")
    def typed(item_id: int) -> dict:
        return {"item_id": item_id}

    return app


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def error_client() -> TestClient:
    return TestClient(build_error_app())


@pytest.fixture
def recorded_client(recording_logger: RecordingLogger) -> TestClient:
    return TestClient(build_error_app(ErrorHandler(log=recording_logger)))
