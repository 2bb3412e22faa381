"""配置模块

从系统环境变量构建后端连接配置，并提供日志初始化。
后端客户端启动时必须提供两个连接参数：服务端点和访问密钥。
"""

import logging
import os
import sys
from typing import Optional

from pydantic import BaseModel, Field


class BackendSettings(BaseModel):
    """后端连接配置"""

    backend_url: str = Field(description="Supabase 项目端点")
    backend_key: str = Field(description="Supabase 访问密钥（anon key）")
    mock_delay_seconds: float = Field(
        default=0.0,
        ge=0.0,
        description="模拟分析与职位匹配的人为延迟（秒）"
    )

    @classmethod
    def from_env(cls) -> "BackendSettings":
        """从系统环境变量读取配置

        Raises:
            ValueError: 缺少 FUTUREU_BACKEND_URL 或 FUTUREU_BACKEND_KEY
        """
        backend_url = os.getenv("FUTUREU_BACKEND_URL")
        backend_key = os.getenv("FUTUREU_BACKEND_KEY")
        if not backend_url or not backend_key:
            raise ValueError(
                "缺少后端环境变量。请确保设置了 FUTUREU_BACKEND_URL 和 FUTUREU_BACKEND_KEY。"
            )

        values = {"backend_url": backend_url, "backend_key": backend_key}

        delay = os.getenv("FUTUREU_MOCK_DELAY")
        if delay:
            values["mock_delay_seconds"] = float(delay)

        return cls(**values)


def configure_logging(level: Optional[str] = None) -> None:
    """初始化根日志器，输出到标准输出

    Args:
        level: 日志级别名称，为空时读取 FUTUREU_LOG_LEVEL，默认 INFO
    """
    level_name = (level or os.getenv("FUTUREU_LOG_LEVEL") or "INFO").upper()
    handlers = [logging.StreamHandler(sys.stdout)]
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=handlers,
    )
