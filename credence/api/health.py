# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from fastapi import APIRouter

from credence.domain import schemas
from credence.infra.config import settings


router = APIRouter(tags=["health"])


@router.get("/health", response_model=schemas.HealthStatus)
def health_check() -> schemas.HealthStatus:
    return schemas.HealthStatus(status="ok", service=settings.SERVICE_NAME)
