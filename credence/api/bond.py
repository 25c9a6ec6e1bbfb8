# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from fastapi import APIRouter, Depends

from credence.api.deps import get_bond_usecase
from credence.application.bond.usecase import BondUsecase
from credence.domain import schemas


router = APIRouter(prefix="/bond", tags=["bond"])


@router.get("/{address}", response_model=schemas.BondRecord)
def get_bond(
    address: str,
    uc: BondUsecase = Depends(get_bond_usecase),
):
    return uc.get_bond(address)
