# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

"""credence-backend: Credence HTTP API 骨架"""

__version__ = "0.1.0"
