"""
全局常量定义
"""

from enum import Enum


class FilterMode(str, Enum):
    """过滤模式枚举"""
    REGEX = "regex"    # re 参数 - 标题匹配正则则保留
    SKIP = "skip"      # skip 参数 - 标题包含任一屏蔽词则丢弃


# 查询参数名
URL_PARAM = "url"
REGEX_PARAM = "re"
SKIP_PARAM = "skip"

RSS_MEDIA_TYPE = "text/xml"
