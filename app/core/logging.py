# app/core/logging.py
# -----------------------------------------------------------------------------
# Loguru 기반 로깅 설정
# - 파일 회전/보존/백트레이스
# - 레벨은 settings.LOG_LEVEL
# -----------------------------------------------------------------------------
from pathlib import Path

from loguru import logger

from app.core.config import settings


def setup_logging() -> None:
    log_dir = Path(settings.LOG_DIR)
    log_dir.mkdir(exist_ok=True, parents=True)

    logger.remove()  # 기본 핸들러 제거
    logger.add(
        log_dir / "app.log",
        rotation="10 MB",
        retention="10 files",
        enqueue=True,  # 멀티프로세스 안전
        backtrace=True,
        diagnose=True,
        level=settings.LOG_LEVEL,
    )
