# app/services/capacity.py
# -----------------------------------------------------------------------------
# 좌석 회전율 기반 일 판매량 추정
# -----------------------------------------------------------------------------
import math


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def _safe_stay(stay_duration: float) -> float:
    # 0 이하 점유시간은 1시간으로 간주 (0 나누기 방지)
    return stay_duration if stay_duration > 0 else 1


def max_daily_capacity(seat_count: float, operating_hours: float, stay_duration: float) -> int:
    """좌석 x (영업시간 / 점유시간), 회전율 100% 기준 최대 잔수"""
    return _round_half_up(seat_count * (operating_hours / _safe_stay(stay_duration)))


def estimate_daily_sales(
    seat_count: float,
    operating_hours: float,
    stay_duration: float,
    turnover_target: float,
) -> int:
    """
    일 예상 판매 잔수.

    turnover_target 은 1.0 초과도 허용 (평균보다 빠른 회전).
    """
    capacity = seat_count * (operating_hours / _safe_stay(stay_duration))
    return _round_half_up(capacity * turnover_target)
