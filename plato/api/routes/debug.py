from fastapi import APIRouter, status

from plato.core.logger import log_buffer

router = APIRouter()


@router.get("/logs")
def get_logs():
    """Recent generation steps, oldest first."""
    return log_buffer.get_logs()


@router.delete("/logs", status_code=status.HTTP_204_NO_CONTENT)
def clear_logs():
    log_buffer.clear()
