# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from credence.domain import schemas


class TrustUsecase:
    # TODO: 接入信誉引擎后按地址查询真实分数，目前只返回占位记录
    def get_trust(self, address: str) -> schemas.TrustRecord:
        return schemas.TrustRecord(address=address)
