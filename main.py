#!/usr/bin/env python3
"""
feedproxy - RSS/Atom filtering proxy
Main application entry point
"""

import logging

import uvicorn

from feedproxy.core.app import create_app
from feedproxy.core.config import config

logger = logging.getLogger(__name__)

# 创建应用程序实例
app = create_app()


def main():
    """主函数 - 启动应用程序"""
    server_config = config.get_server_config()
    try:
        # uvicorn 负责 SIGINT/SIGTERM 处理与连接收尾
        uvicorn.run(
            "main:app",
            host=server_config["host"],
            port=server_config["port"],
            log_level=config.get("logging.level", "INFO").lower(),
        )
    except KeyboardInterrupt:
        logger.info("收到中断信号，正在关闭...")
    except Exception as e:
        logger.error(f"启动失败: {e}")
        raise


if __name__ == "__main__":
    main()
