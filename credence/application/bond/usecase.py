# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from credence.domain import schemas


class BondUsecase:
    """保证金查询（占位实现，无持久化）"""

    def get_bond(self, address: str) -> schemas.BondRecord:
        return schemas.BondRecord(address=address)
