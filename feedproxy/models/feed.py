"""
Feed 数据模型

SourceFeed/SourceItem 为解析后的上游 feed，OutputFeed/OutputItem 为过滤后待输出的 RSS。
所有模型只在单个请求内存在。
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class Author(BaseModel):
    """作者信息，上游可能只提供 name 或 email 其中之一"""
    name: str = ""
    email: str = ""


class SourceItem(BaseModel):
    """上游 feed 条目"""
    title: str = ""
    link: str = ""
    description: str = ""
    author: Optional[Author] = None
    published: Optional[datetime] = None


class SourceFeed(BaseModel):
    """解析后的上游 feed"""
    title: str = ""
    link: str = ""
    description: str = ""
    author: Optional[Author] = None
    items: List[SourceItem] = Field(default_factory=list)


class OutputItem(BaseModel):
    """输出 RSS 条目"""
    title: str
    link: str
    description: str
    author: Optional[Author] = None
    created: datetime


class OutputFeed(BaseModel):
    """过滤后的输出 feed"""
    title: str
    link: str
    description: str
    author: Optional[Author] = None
    created: datetime
    items: List[OutputItem] = Field(default_factory=list)
