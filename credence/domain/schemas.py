# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    """对外字段统一 camelCase"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class HealthStatus(_CamelModel):
    status: str
    service: str


class TrustRecord(_CamelModel):
    address: str
    score: int = 0
    bonded_amount: str = "0"
    bond_start: Optional[str] = None
    attestation_count: int = 0


class BondRecord(_CamelModel):
    address: str
    bonded_amount: str = "0"
    bond_start: Optional[str] = None
    bond_duration: Optional[int] = None
    active: bool = False


class ErrorResponse(_CamelModel):
    """错误响应结构（仅用于文档，实际由错误处理层直接拼 JSON）"""

    code: str
    message: str
    details: Optional[Any] = None
    request_id: Optional[str] = None
