# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from credence import __version__
from credence.api import bond as bond_api, fallback as fallback_api, health as health_api, trust as trust_api
from credence.common.errors import AppError
from credence.common.exception_handlers import ErrorHandler
from credence.common.logging import setup_logging
from credence.common.middlewares import ErrorHandlerMiddleware, RequestIdMiddleware
from credence.domain import schemas
from credence.infra.config import settings

logger = logging.getLogger(__name__)

_ERROR_RESPONSES = {
    404: {"model": schemas.ErrorResponse},
    500: {"model": schemas.ErrorResponse},
}


def register_error_handling(app: FastAPI, handler: ErrorHandler | None = None) -> None:
    """挂上统一错误处理

    已知异常走 exception handler；未知异常由 ErrorHandlerMiddleware 兜底，
    两条路共用同一个 ErrorHandler，保证响应结构一致。
    """
    handler = handler if handler is not None else ErrorHandler()

    app.add_exception_handler(AppError, handler)
    app.add_exception_handler(RequestValidationError, handler)
    app.add_exception_handler(StarletteHTTPException, handler)

    # 后加的在外层：RequestIdMiddleware 必须包住 ErrorHandlerMiddleware
    app.add_middleware(ErrorHandlerMiddleware, handler=handler)
    app.add_middleware(RequestIdMiddleware)


def create_app() -> FastAPI:
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.SERVICE_NAME,
        version=__version__,
    )

    # ---------- middlewares / handlers ----------

    register_error_handling(app)

    # ---------- routers ----------

    app.include_router(health_api.router, prefix="/api")
    app.include_router(trust_api.router, prefix="/api", responses=_ERROR_RESPONSES)
    app.include_router(bond_api.router, prefix="/api", responses=_ERROR_RESPONSES)

    # 兜底 404，放在最后
    app.include_router(fallback_api.router)

    return app


app = create_app()


def main() -> None:
    if settings.is_test:
        logger.info("ENV=test, skip listening")
        return

    logger.info("Credence API listening on http://%s:%s", settings.HOST, settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    main()
