import logging

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from ..services.status_service import collect_status, format_status

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/status", response_class=PlainTextResponse, summary="资源状态", tags=["Status"])
async def status() -> str:
    """返回 CPU、内存和当前任务数的纯文本快照"""
    snapshot = collect_status()
    logger.debug(f"状态快照: {snapshot}")
    return format_status(snapshot)
