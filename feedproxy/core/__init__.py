"""
Core 模块

包含应用程序的核心组件：
- config: 配置管理
- constants: 全局常量
- exceptions: 异常定义
- app: 应用程序工厂
- logging: 日志系统
"""

from .config import config
from .constants import FilterMode

__all__ = [
    "config",
    "FilterMode",
]
