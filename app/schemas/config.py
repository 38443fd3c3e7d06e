# app/schemas/config.py
# -----------------------------------------------------------------------------
# 사업 설정 스키마 (시나리오 1건의 단일 진실 공급원)
# - 기본값은 기본 사업계획(좌석 60석, 공간대여 50,000원/h, 와인바 5팀/일)
# - 비율 필드는 0~1 분수지만 범위 검증은 하지 않음 (입력 UI 책임)
# -----------------------------------------------------------------------------
from pydantic import BaseModel, Field


class CafeConfig(BaseModel):
    avg_price_americano: float = 4_500
    avg_price_latte: float = 5_000
    avg_price_syrup_latte: float = 5_500
    bean_price_per_kg: float = 30_000
    milk_price_per_l: float = 2_500

    # 좌석 회전 기반 판매량 추정
    seat_count: float = 60
    operating_hours: float = 9  # 10시 ~ 19시
    stay_duration: float = 2  # 평균 점유시간(h)
    turnover_target: float = 0.5

    # 메뉴 비중 (합계 1.0 권장, 강제하지 않음)
    ratio_americano: float = 0.5
    ratio_latte: float = 0.3
    ratio_syrup_latte: float = 0.2

    takeout_ratio: float = 0.7
    ice_ratio: float = 0.75
    operating_days: float = 26


class CafeSupplies(BaseModel):
    # 소모품 (원/개)
    hot_cup: float = 39
    hot_lid: float = 25
    stick: float = 5
    ice_cup: float = 52
    ice_lid: float = 26
    straw: float = 6
    holder: float = 19
    carrier: float = 60
    wipe: float = 18
    napkin: float = 4
    dishwashing: float = 60  # 매장 컵 세척 비용

    # 잔당 고정 재료비 (원)
    water: float = 30
    ice: float = 50
    syrup: float = 60

    # 잔당 사용량
    bean_grams: float = 20
    milk_ml: float = 150


class SpaceConfig(BaseModel):
    hourly_rate: float = 50_000
    hours_per_day: float = 8
    operating_days: float = 30
    utilization_rate: float = 0.5


class WineConfig(BaseModel):
    avg_ticket_price: float = 65_000
    cost_of_goods_sold_rate: float = 0.35
    daily_tables: float = 5
    operating_days: float = 24


class FixedCosts(BaseModel):
    weekday_staff: float = 2
    weekend_staff: float = 1
    additional_labor: float = 0
    utilities: float = 2_000_000
    internet: float = 40_000
    marketing: float = 1_000_000
    maintenance: float = 100_000
    misc: float = 100_000


class InitialInvestment(BaseModel):
    interior: float = 50_000_000
    equipment: float = 15_000_000
    design: float = 2_000_000
    supplies: float = 5_000_000

    @property
    def total(self) -> float:
        return self.interior + self.equipment + self.design + self.supplies


class BusinessConfig(BaseModel):
    cafe: CafeConfig = Field(default_factory=CafeConfig)
    cafe_supplies: CafeSupplies = Field(default_factory=CafeSupplies)
    space: SpaceConfig = Field(default_factory=SpaceConfig)
    wine: WineConfig = Field(default_factory=WineConfig)
    fixed: FixedCosts = Field(default_factory=FixedCosts)
    initial: InitialInvestment = Field(default_factory=InitialInvestment)
