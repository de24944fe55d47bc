"""
异常定义

客户端输入错误在抓取前检测，返回 400；上游抓取、解析和转换错误返回 500。
"""


class FeedProxyError(Exception):
    """所有业务异常的基类"""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ClientInputError(FeedProxyError):
    """请求参数错误"""

    status_code = 400


class MissingURL(ClientInputError):
    def __init__(self, message: str = "missing 'url'"):
        super().__init__(message)


class MissingFilterSpec(ClientInputError):
    def __init__(self, message: str = "missing 'skip' or 're'"):
        super().__init__(message)


class InvalidFilterSyntax(ClientInputError):
    pass


class UpstreamError(FeedProxyError):
    """上游 feed 相关错误"""

    status_code = 500


class FetchError(UpstreamError):
    pass


class ParseError(UpstreamError):
    pass


class MissingPublishedDate(UpstreamError):
    pass
