"""
运行状态服务

使用 psutil 采集 CPU 与内存快照，使用 asyncio 统计当前任务数
"""

import asyncio
import logging

import psutil

from ..models.schemas import StatusSnapshot

logger = logging.getLogger(__name__)

MEGABYTE = 1024 * 1024

STATUS_TEMPLATE = (
    "CPU used:\t{cpu_percent:.2f}%\n"
    "RAM used:\t{process_memory_mb} / {host_used_memory_mb} / "
    "{host_total_memory_mb} MB ({host_memory_percent:.0f}%)\n"
    "Tasks:\t{task_count}"
)


def collect_status() -> StatusSnapshot:
    """采集当前时刻的资源快照，需在事件循环内调用"""
    # interval=None 返回自上次调用以来的占用率，首次调用为 0.0
    cpu_percent = psutil.cpu_percent(interval=None)
    process_memory = psutil.Process().memory_info().rss
    host_memory = psutil.virtual_memory()

    return StatusSnapshot(
        cpu_percent=cpu_percent,
        process_memory_mb=process_memory // MEGABYTE,
        host_used_memory_mb=host_memory.used // MEGABYTE,
        host_total_memory_mb=host_memory.total // MEGABYTE,
        host_memory_percent=host_memory.percent,
        task_count=len(asyncio.all_tasks()),
    )


def format_status(snapshot: StatusSnapshot) -> str:
    """按固定模板渲染状态文本"""
    return STATUS_TEMPLATE.format(**snapshot.model_dump())
