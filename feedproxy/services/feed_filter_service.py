import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from ..core.exceptions import MissingPublishedDate
from ..models.feed import OutputFeed, OutputItem, SourceFeed

logger = logging.getLogger(__name__)


def filter_feed(
    source: SourceFeed,
    keep_item: Callable[[str], bool],
    now: Optional[datetime] = None,
) -> OutputFeed:
    """按标题过滤条目并生成输出 feed，保持原有顺序"""
    output = OutputFeed(
        title=source.title,
        link=source.link,
        description=source.description,
        author=source.author.model_copy() if source.author else None,
        created=now or datetime.now(timezone.utc),
    )

    for item in source.items:
        if not keep_item(item.title):
            continue

        if item.published is None:
            raise MissingPublishedDate(
                f"item {item.title!r} ({item.link}) has no publication date"
            )

        output.items.append(OutputItem(
            title=item.title,
            link=item.link,
            description=item.description,
            author=item.author.model_copy() if item.author else None,
            created=item.published,
        ))

    logger.info(
        f"过滤完成: {source.title}, 保留 {len(output.items)}/{len(source.items)} 条"
    )
    return output
