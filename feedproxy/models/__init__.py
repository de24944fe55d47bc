"""
数据模型包

包含 feed 模型和数据传输对象：
- feed: 上游 feed 与输出 feed 模型 (Pydantic)
- schemas: API 响应模型 (Pydantic)
"""

from .feed import Author, OutputFeed, OutputItem, SourceFeed, SourceItem
from .schemas import StatusSnapshot

__all__ = [
    # Feed models
    "Author",
    "SourceFeed",
    "SourceItem",
    "OutputFeed",
    "OutputItem",
    # Schemas
    "StatusSnapshot",
]
