# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from credence.application.bond.usecase import BondUsecase
from credence.application.trust.usecase import TrustUsecase


_trust_uc_singleton = TrustUsecase()
_bond_uc_singleton = BondUsecase()


def get_trust_usecase() -> TrustUsecase:
    return _trust_uc_singleton


def get_bond_usecase() -> BondUsecase:
    return _bond_uc_singleton
