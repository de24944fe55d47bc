"""
错误处理中间件

所有错误以纯文本返回：参数错误 400，上游错误 500，正文为错误描述
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..core.exceptions import ClientInputError, FeedProxyError

logger = logging.getLogger(__name__)


def setup_error_handlers(app: FastAPI) -> None:
    """设置全局错误处理器"""

    @app.exception_handler(FeedProxyError)
    async def feed_proxy_exception_handler(
        request: Request, exc: FeedProxyError
    ) -> PlainTextResponse:
        """处理业务异常"""
        if isinstance(exc, ClientInputError):
            logger.warning(f"请求参数错误: {request.url.path}: {exc}")
        else:
            logger.error(f"{type(exc).__name__}: {request.url.path}: {exc}")

        return PlainTextResponse(str(exc), status_code=exc.status_code)

    @app.exception_handler(StarletteHTTPException)
    async def starlette_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> PlainTextResponse:
        """处理 HTTP 异常 (如 404)"""
        logger.warning(f"HTTP 异常: {request.method} {request.url.path}: "
                       f"{exc.status_code}: {exc.detail}")

        return PlainTextResponse(str(exc.detail), status_code=exc.status_code,
                                 headers=getattr(exc, "headers", None))

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request, exc: Exception
    ) -> PlainTextResponse:
        """处理未捕获的异常"""
        logger.error(f"未处理异常: {type(exc).__name__}: {str(exc)}", exc_info=True)

        return PlainTextResponse(str(exc) or type(exc).__name__, status_code=500)
