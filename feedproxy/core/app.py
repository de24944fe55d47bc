"""
应用程序工厂

负责创建和配置 FastAPI 应用程序实例，路由在此显式组装
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from .. import __version__
from ..controllers import feed_router, status_router
from ..middleware import LoggingMiddleware, setup_error_handlers
from .config import config
from .logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用程序生命周期管理"""
    server_config = config.get_server_config()
    logger.info(
        f"正在启动 feedproxy... 监听 {server_config['host']}:{server_config['port']}"
    )
    yield

    # 进行中的请求由 uvicorn 负责收尾
    logger.info("正在关闭 feedproxy...")


def create_app() -> FastAPI:
    """创建 FastAPI 应用程序实例"""

    setup_logging()

    # 创建应用程序实例 (禁用文档端点)
    app = FastAPI(
        title="feedproxy",
        description="RSS/Atom 过滤代理",
        version=__version__,
        lifespan=lifespan,
        docs_url=None,  # 禁用 Swagger 文档
        redoc_url=None,  # 禁用 ReDoc 文档
        openapi_url=None,  # 禁用 OpenAPI schema
    )

    setup_error_handlers(app)

    # 添加日志中间件
    app.add_middleware(LoggingMiddleware)

    app.include_router(status_router)
    app.include_router(feed_router)

    return app
