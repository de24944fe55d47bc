"""
数据传输对象定义

使用 Pydantic 定义 API 的响应模型
"""

from pydantic import BaseModel


class StatusSnapshot(BaseModel):
    """主机资源快照"""
    cpu_percent: float
    process_memory_mb: int
    host_used_memory_mb: int
    host_total_memory_mb: int
    host_memory_percent: float
    task_count: int
