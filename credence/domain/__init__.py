# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

"""
领域层：

- schemas: Pydantic 响应模型（health / trust / bond 占位记录）
"""
from . import schemas  # noqa: F401

__all__ = ["schemas"]
