# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from fastapi import APIRouter, Depends

from credence.api.deps import get_trust_usecase
from credence.application.trust.usecase import TrustUsecase
from credence.domain import schemas


router = APIRouter(prefix="/trust", tags=["trust"])


@router.get("/{address}", response_model=schemas.TrustRecord)
def get_trust(
    address: str,
    uc: TrustUsecase = Depends(get_trust_usecase),
):
    return uc.get_trust(address)
