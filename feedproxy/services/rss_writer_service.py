"""
RSS 2.0 输出

把 OutputFeed 渲染为 RSS 2.0 文档。文本内容由 ElementTree 负责 XML 转义，
日期使用 RFC 1123 数字时区格式，如 "Mon, 02 Jan 2006 15:04:05 -0700"。
"""

import io
import xml.etree.ElementTree as ET
from datetime import datetime, timezone
from email.utils import format_datetime
from typing import BinaryIO, Optional

from ..models.feed import Author, OutputFeed, OutputItem


def format_rss_date(value: datetime) -> str:
    """格式化为 RSS pubDate，naive 时间按 UTC 处理"""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return format_datetime(value)


def format_author(author: Optional[Author]) -> Optional[str]:
    """RSS 作者写法: "email (name)"，只有其中一项时直接输出"""
    if author is None:
        return None
    if author.email and author.name:
        return f"{author.email} ({author.name})"
    return author.email or author.name or None


def _text_element(parent: ET.Element, tag: str, text: str) -> ET.Element:
    element = ET.SubElement(parent, tag)
    element.text = text
    return element


def _build_item(channel: ET.Element, item: OutputItem) -> None:
    element = ET.SubElement(channel, "item")
    _text_element(element, "title", item.title)
    _text_element(element, "link", item.link)
    _text_element(element, "description", item.description)

    author = format_author(item.author)
    if author:
        _text_element(element, "author", author)

    _text_element(element, "pubDate", format_rss_date(item.created))


def build_rss_tree(feed: OutputFeed) -> ET.ElementTree:
    """构建 RSS 文档树"""
    root = ET.Element("rss", version="2.0")
    channel = ET.SubElement(root, "channel")
    _text_element(channel, "title", feed.title)
    _text_element(channel, "link", feed.link)
    _text_element(channel, "description", feed.description)

    managing_editor = format_author(feed.author)
    if managing_editor:
        _text_element(channel, "managingEditor", managing_editor)

    _text_element(channel, "pubDate", format_rss_date(feed.created))

    for item in feed.items:
        _build_item(channel, item)

    return ET.ElementTree(root)


def write_rss(feed: OutputFeed, stream: BinaryIO) -> None:
    """把 RSS 写入二进制流，写入错误直接向上抛出"""
    build_rss_tree(feed).write(stream, encoding="UTF-8", xml_declaration=True)


def render_rss(feed: OutputFeed) -> bytes:
    """渲染为完整的 RSS 字节串"""
    buffer = io.BytesIO()
    write_rss(feed, buffer)
    return buffer.getvalue()
