# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

"""通用基础设施（错误/日志/request id 等）

约定：
- Router 不拼错误 JSON：错误统一通过 AppError 抛出，由全局错误处理转为标准响应
- request id 通过 middleware 注入，并写入日志，便于线上排障
"""

from __future__ import annotations
