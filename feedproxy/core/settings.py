"""
Pydantic配置模型定义

使用Pydantic定义所有配置结构，提供类型检查和验证
"""

import os
import re
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, Field


class ServerConfig(BaseModel):
    """监听配置"""
    host: str = Field(default="0.0.0.0", description="监听地址")
    port: int = Field(default=8000, ge=1, le=65535, description="监听端口")


class FetchConfig(BaseModel):
    """上游 feed 抓取配置"""
    timeout_seconds: float = Field(default=30.0, gt=0, description="请求超时时间（秒）")
    user_agent: str = Field(default="feedproxy/1.0", description="User-Agent 请求头")
    follow_redirects: bool = Field(default=True, description="是否跟随重定向")


class LoggingConfig(BaseModel):
    """日志配置"""
    level: str = Field(default="INFO", description="日志级别")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="日志格式"
    )
    file: Optional[str] = Field(default="data/feedproxy.log",
                                description="日志文件路径，为空则只输出到控制台")


class AppConfig(BaseModel):
    """完整应用配置模型"""
    server: ServerConfig = Field(default_factory=ServerConfig, description="监听配置")
    fetch: FetchConfig = Field(default_factory=FetchConfig, description="抓取配置")
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="日志配置")

    @classmethod
    def load_from_file(cls, config_path: str) -> "AppConfig":
        """从配置文件加载配置"""
        if not os.path.exists(config_path):
            raise FileNotFoundError(f"配置文件不存在: {config_path}")

        config_data = cls._load_yaml_with_env(config_path)
        return cls(**config_data)

    @staticmethod
    def _load_yaml_with_env(file_path: str) -> Dict[str, Any]:
        """加载YAML文件并处理环境变量"""
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                content = f.read()

            # 处理环境变量占位符 ${ENV_VAR:-default_value}
            def replace_env_vars(match):
                var_expr = match.group(1)
                if ":-" in var_expr:
                    env_var, default_value = var_expr.split(":-", 1)
                    return os.getenv(env_var) or default_value
                else:
                    return os.getenv(var_expr, "")

            content = re.sub(r"\$\{([^}]+)\}", replace_env_vars, content)
            return yaml.safe_load(content) or {}
        except Exception as e:
            raise RuntimeError(f"配置文件加载失败 {file_path}: {e}")

    def get_server_dict(self) -> Dict[str, Any]:
        """获取监听配置字典"""
        return {
            "host": self.server.host,
            "port": self.server.port,
        }

    def get_fetch_dict(self) -> Dict[str, Any]:
        """获取抓取配置字典"""
        return {
            "timeout_seconds": self.fetch.timeout_seconds,
            "user_agent": self.fetch.user_agent,
            "follow_redirects": self.fetch.follow_redirects,
        }

    def get_logging_dict(self) -> Dict[str, Any]:
        """获取日志配置字典"""
        return {
            "level": self.logging.level,
            "format": self.logging.format,
            "file": self.logging.file,
        }
