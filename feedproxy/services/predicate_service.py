"""
过滤条件构建

根据查询参数构建唯一的标题过滤谓词：
- re: 标题中任意位置匹配正则则保留
- skip: 标题按空白切分后，任一词与屏蔽词完全相同则丢弃

两者同时出现时 re 优先。
"""

import logging
import re
from typing import Iterable, List, Optional, Union

from ..core.constants import FilterMode
from ..core.exceptions import InvalidFilterSyntax, MissingFilterSpec

logger = logging.getLogger(__name__)


class RegexPredicate:
    """正则过滤：search 匹配即保留"""

    mode = FilterMode.REGEX

    def __init__(self, pattern: str):
        self.pattern = pattern
        try:
            self.regex = re.compile(pattern)
        except re.error as e:
            raise InvalidFilterSyntax(f"invalid 're' pattern {pattern!r}: {e}")

    def __call__(self, title: str) -> bool:
        return self.regex.search(title) is not None

    def __repr__(self) -> str:
        return f"RegexPredicate({self.pattern!r})"


class SkipWordsPredicate:
    """屏蔽词过滤：大小写敏感，整词匹配"""

    mode = FilterMode.SKIP

    def __init__(self, skip_words: Iterable[str]):
        self.skip_words = frozenset(skip_words)

    def __call__(self, title: str) -> bool:
        for word in title.split():
            if word in self.skip_words:
                return False
        return True

    def __repr__(self) -> str:
        return f"SkipWordsPredicate({sorted(self.skip_words)!r})"


FilterPredicate = Union[RegexPredicate, SkipWordsPredicate]


def select_filter_mode(
    pattern: Optional[str], skip_words: Optional[List[str]]
) -> FilterMode:
    """选择过滤模式，re 参数存在即为正则模式（即使为空字符串）"""
    if pattern is not None:
        return FilterMode.REGEX
    if skip_words:
        return FilterMode.SKIP
    raise MissingFilterSpec()


def build_predicate(
    pattern: Optional[str], skip_words: Optional[List[str]]
) -> FilterPredicate:
    """构建过滤谓词，正则编译失败时抛出 InvalidFilterSyntax"""
    mode = select_filter_mode(pattern, skip_words)

    if mode is FilterMode.REGEX:
        predicate = RegexPredicate(pattern)
    else:
        predicate = SkipWordsPredicate(skip_words)

    logger.debug(f"过滤条件: {predicate!r}")
    return predicate
