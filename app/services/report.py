# app/services/report.py
# -----------------------------------------------------------------------------
# AI 전략 리포트
# - build_report_snapshot: 엔진 수치 → 반올림된 평면 스냅샷 (순수 함수)
# - GeminiReportGenerator: 스냅샷 → 프롬프트 → Gemini generateContent 호출
# -----------------------------------------------------------------------------
from __future__ import annotations

import asyncio
from datetime import datetime
from typing import Optional, Protocol

import httpx
from loguru import logger

from app.core.config import settings
from app.schemas.config import BusinessConfig
from app.schemas.finance import BreakEven, FinancialSummary
from app.schemas.report import BusinessReport, ReportSnapshot


class ReportGenerationError(RuntimeError):
    pass


def build_report_snapshot(
    config: BusinessConfig, summary: FinancialSummary, break_even: BreakEven
) -> ReportSnapshot:
    return ReportSnapshot(
        monthly_revenue=round(summary.total_revenue),
        net_profit=round(summary.net_profit),
        initial_investment=round(summary.total_investment),
        turnover_target_pct=round(config.cafe.turnover_target * 100, 1),
        utilization_rate_pct=round(config.space.utilization_rate * 100, 1),
        wine_daily_tables=config.wine.daily_tables,
        break_even=break_even.label,
    )


def build_prompt(snap: ReportSnapshot) -> str:
    return f"""
당신은 카페 + 공간대여 + 와인바 복합 매장의 시니어 비즈니스 컨설턴트입니다.
아래 사업 계획 수치를 바탕으로 전략 및 손익 분석 리포트를 작성해주세요.

데이터:
- 월 매출: ₩{snap.monthly_revenue:,}
- 월 순이익: ₩{snap.net_profit:,}
- 초기 투자금: ₩{snap.initial_investment:,}
- 카페 회전율 목표: {snap.turnover_target_pct}%
- 공간대여 가동률: {snap.utilization_rate_pct}%
- 와인바 일 테이블: {snap.wine_daily_tables:g}팀
- 손익분기: {snap.break_even}

포함할 항목:
1. 복합 모델의 SWOT 분석
2. 순이익률 기반 재무 리스크 평가
3. 세 사업의 매출 구성 최적화를 위한 실행 전략

전문적인 어조의 한국어 마크다운으로 작성하세요.
""".strip()


class ReportGenerator(Protocol):
    async def generate(self, snapshot: ReportSnapshot) -> str: ...


class GeminiReportGenerator:
    """Gemini REST generateContent 호출. 타임아웃 시 최대 3회 재시도."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        max_attempts: int = 3,
        backoff_sec: float = 1.5,
    ):
        self.api_key = api_key or settings.GEMINI_API_KEY
        self.model = model or settings.GEMINI_MODEL
        self.transport = transport
        self.max_attempts = max_attempts
        self.backoff_sec = backoff_sec

    @property
    def url(self) -> str:
        return f"{settings.GEMINI_API_URL}/{self.model}:generateContent"

    @staticmethod
    def _extract_text(data: dict) -> str:
        parts = (
            ((data.get("candidates") or [{}])[0].get("content") or {}).get("parts")
            or []
        )
        return "".join(p.get("text", "") for p in parts).strip()

    async def generate(self, snapshot: ReportSnapshot) -> str:
        if not self.api_key:
            raise ReportGenerationError("GEMINI_API_KEY가 설정되어 있지 않습니다.")

        body = {"contents": [{"parts": [{"text": build_prompt(snapshot)}]}]}
        headers = {"x-goog-api-key": self.api_key}
        timeout = httpx.Timeout(settings.GEMINI_TIMEOUT_SEC, connect=6.0)

        for attempt in range(self.max_attempts):
            try:
                async with httpx.AsyncClient(
                    timeout=timeout, transport=self.transport
                ) as client:
                    r = await client.post(self.url, json=body, headers=headers)
                    r.raise_for_status()
                    text = self._extract_text(r.json())
                if not text:
                    raise ReportGenerationError("Gemini 응답이 비어 있습니다.")
                return text

            except (httpx.ConnectTimeout, httpx.ReadTimeout) as e:
                wait = self.backoff_sec * (attempt + 1)
                logger.warning(
                    f"[report] timeout 재시도 {attempt+1}/{self.max_attempts} … {e}. {wait:.1f}s 대기"
                )
                if attempt < self.max_attempts - 1:
                    await asyncio.sleep(wait)
            except httpx.HTTPError as e:
                logger.error(f"[report] HTTPError: {e}")
                raise ReportGenerationError(f"Gemini 호출 실패: {e}") from e
            except (ValueError, AttributeError, TypeError) as e:
                logger.error(f"[report] 응답 파싱 실패: {e}")
                raise ReportGenerationError("Gemini 응답 형식 오류") from e

        raise ReportGenerationError("Gemini 호출 시간 초과")


async def generate_report(
    generator: ReportGenerator, snapshot: ReportSnapshot
) -> BusinessReport:
    content = await generator.generate(snapshot)
    logger.info(f"[report] generated {len(content)} chars")
    return BusinessReport(content=content, timestamp=datetime.now())
