# -*- coding: utf-8 -*-
# @Author: yaccii
# @Description:

from __future__ import annotations

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """全局配置，从 .env / 环境变量读取"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # 运行环境：test 时入口不监听端口（给测试框架内嵌用）
    # NODE_ENV 优先：shell 里的 ENV 常被用作启动脚本路径
    ENV: str = Field(
        "dev",
        description="运行环境: dev / test / prod",
        validation_alias=AliasChoices("NODE_ENV", "APP_ENV", "ENV"),
    )

    HOST: str = Field(
        "0.0.0.0",
        description="监听地址",
        validation_alias=AliasChoices("HOST", "host"),
    )
    PORT: int = Field(
        3000,
        description="监听端口",
        validation_alias=AliasChoices("PORT", "port"),
    )

    LOG_LEVEL: str = Field(
        "INFO",
        description="日志级别: DEBUG / INFO / WARNING / ERROR",
        validation_alias=AliasChoices("LOG_LEVEL", "log_level"),
    )

    SERVICE_NAME: str = Field(
        "credence-backend",
        description="服务名（health 接口返回）",
        validation_alias=AliasChoices("SERVICE_NAME", "service_name"),
    )

    @property
    def is_test(self) -> bool:
        return self.ENV.strip().lower() == "test"


settings = Settings()
