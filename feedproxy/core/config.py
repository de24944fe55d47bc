import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from .settings import AppConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "config.yaml"


class Config:
    """配置管理类 - 基于Pydantic的类型安全配置"""

    def __init__(self, config_path: Optional[str] = None):
        explicit_path = config_path or os.getenv("FEEDPROXY_CONFIG")
        self.config_path = str(explicit_path or DEFAULT_CONFIG_PATH)

        if explicit_path or os.path.exists(self.config_path):
            self._app_config = AppConfig.load_from_file(self.config_path)
        else:
            # 未提供配置文件时使用内置默认值
            self._app_config = AppConfig()

    def get(self, key: str, default: Any = None) -> Any:
        """获取配置值，key 使用点分隔，如 "fetch.timeout_seconds" """
        keys = key.split(".")
        value = self._app_config

        for k in keys:
            if hasattr(value, k):
                value = getattr(value, k)
            else:
                return default

        return value

    def get_server_config(self) -> Dict[str, Any]:
        """获取监听配置"""
        return self._app_config.get_server_dict()

    def get_fetch_config(self) -> Dict[str, Any]:
        """获取抓取配置"""
        return self._app_config.get_fetch_dict()

    def get_logging_config(self) -> Dict[str, Any]:
        """获取日志配置"""
        return self._app_config.get_logging_dict()

    @property
    def app_config(self) -> AppConfig:
        """获取完整的应用配置对象"""
        return self._app_config


# 全局配置实例
config = Config()
