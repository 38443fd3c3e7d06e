# app/services/unit_cost.py
# -----------------------------------------------------------------------------
# 메뉴별 잔당 원가 계산
# - 3메뉴 x {테이크아웃, 매장} x {HOT, ICE} = 12개 원가
# - ICE 비율 → 테이크아웃 비율 순으로 가중평균하여 메뉴별 최종 원가 산출
# -----------------------------------------------------------------------------
from app.schemas.config import CafeConfig, CafeSupplies
from app.schemas.finance import (
    IngredientCosts,
    PackagingCosts,
    ProductCost,
    ProductMatrix,
    TemperatureCosts,
    UnitCostBreakdown,
)


def _blend(a: float, b: float, ratio: float) -> float:
    """a*ratio + b*(1-ratio)"""
    return a * ratio + b * (1 - ratio)


def ingredient_costs(cafe: CafeConfig, s: CafeSupplies) -> IngredientCosts:
    # 원두/우유는 시장 단가(kg, L) 기준으로 잔당 사용량만큼 환산
    return IngredientCosts(
        bean=(cafe.bean_price_per_kg / 1000) * s.bean_grams,
        milk=(cafe.milk_price_per_l / 1000) * s.milk_ml,
        water=s.water,
        ice=s.ice,
        syrup=s.syrup,
    )


def packaging_costs(s: CafeSupplies) -> PackagingCosts:
    return PackagingCosts(
        takeout_hot=s.hot_cup + s.hot_lid + s.stick + s.holder + s.carrier + s.wipe + s.napkin,
        takeout_ice=s.ice_cup + s.ice_lid + s.straw + s.holder + s.carrier + s.wipe + s.napkin,
        store_hot=s.stick + s.wipe + s.napkin + s.dishwashing,
        store_ice=s.straw + s.wipe + s.napkin + s.dishwashing,
    )


def _menu_costs(pack: float, uc: IngredientCosts, iced: bool) -> ProductCost:
    ice = uc.ice if iced else 0.0
    return ProductCost(
        americano=pack + uc.bean + uc.water + ice,
        latte=pack + uc.bean + uc.milk + ice,
        syrup_latte=pack + uc.bean + uc.milk + ice + uc.syrup,
    )


def calculate_unit_costs(cafe: CafeConfig, supplies: CafeSupplies) -> UnitCostBreakdown:
    """
    카페 설정과 소모품 단가표로 메뉴별 잔당 원가를 계산합니다.

    테이크아웃/ICE 비율은 세 메뉴가 공유합니다 (메뉴별 개별 비율 없음).

    Args:
        cafe (CafeConfig): 원두/우유 시장가와 테이크아웃·ICE 비율.
        supplies (CafeSupplies): 소모품/재료 단가 및 잔당 사용량.

    Returns:
        UnitCostBreakdown: 12개 조합 원가 + 메뉴별 최종 가중평균 원가.
    """
    uc = ingredient_costs(cafe, supplies)
    pack = packaging_costs(supplies)

    products = ProductMatrix(
        takeout=TemperatureCosts(
            hot=_menu_costs(pack.takeout_hot, uc, iced=False),
            ice=_menu_costs(pack.takeout_ice, uc, iced=True),
        ),
        store=TemperatureCosts(
            hot=_menu_costs(pack.store_hot, uc, iced=False),
            ice=_menu_costs(pack.store_ice, uc, iced=True),
        ),
    )

    final: dict[str, float] = {}
    for menu in ("americano", "latte", "syrup_latte"):
        takeout = _blend(
            getattr(products.takeout.ice, menu),
            getattr(products.takeout.hot, menu),
            cafe.ice_ratio,
        )
        store = _blend(
            getattr(products.store.ice, menu),
            getattr(products.store.hot, menu),
            cafe.ice_ratio,
        )
        final[menu] = _blend(takeout, store, cafe.takeout_ratio)

    return UnitCostBreakdown(
        unit_costs=uc,
        packaging=pack,
        products=products,
        final_cost_americano=final["americano"],
        final_cost_latte=final["latte"],
        final_cost_syrup_latte=final["syrup_latte"],
    )
