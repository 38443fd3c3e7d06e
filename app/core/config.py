# app/core/config.py
# -----------------------------------------------------------------------------
# 전역 설정 관리 (pydantic-settings v2)
# - .env 파일과 OS 환경변수를 읽어 Settings 객체로 제공
# - 인건비 단가/예측 기간 기본값도 여기서 오버라이드 가능
# -----------------------------------------------------------------------------
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # 기본
    APP_NAME: str = "BizPlanner 3-in-1"
    ENV: str = "dev"
    DATABASE_URL: str = "sqlite+aiosqlite:///./planner.db"

    # 로깅
    LOG_DIR: str = "logs"
    LOG_LEVEL: str = "INFO"

    # Gemini 리포트
    GEMINI_API_KEY: str | None = None
    GEMINI_MODEL: str = "gemini-3-flash-preview"
    GEMINI_API_URL: str = "https://generativelanguage.googleapis.com/v1beta/models"
    GEMINI_TIMEOUT_SEC: float = 30.0

    # 인건비 (2026 최저시급 기준, 주휴 포함 월 환산)
    HOURLY_WAGE: int = 10_320
    WEEKDAY_MONTHLY_HOURS: float = 209.0
    WEEKEND_MONTHLY_HOURS: float = 83.45
    # 미지정 시 시급 x 월 환산시간으로 산출 (고정 단가가 필요하면 직접 지정)
    WEEKDAY_MONTHLY_RATE: int | None = None
    WEEKEND_MONTHLY_RATE: int | None = None

    # 월별 예측
    DEFAULT_PROJECTION_MONTHS: int = 10
    MAX_PROJECTION_MONTHS: int = 120

    model_config = SettingsConfigDict(
        env_file=".env", extra="ignore"  # .env에 추가 필드 무시
    )


settings = Settings()
