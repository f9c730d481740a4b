#!/usr/bin/env python3
"""
单味药寒热贡献计算

贡献 = 修正寒热值 × 五味系数 × 剂量比（开方阻尼）
矢量 x 取主味的散收方向，y 取升降浮沉方向，均按同一剂量比缩放
"""

import math
import logging
from typing import Optional, Tuple

from config.settings import ENERGETICS_CONFIG
from .catalog import CatalogSnapshot
from .models import (
    ResolvedHerb, HerbContribution, Flavor, Temperature, Vector2D, CatalogEntry
)
from .region_distributor import region_weights_for

logger = logging.getLogger(__name__)


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def damped_ratio(dosage_grams: float, reference_dosage: float) -> float:
    """剂量比的平方根阻尼：4倍剂量约2倍影响"""
    if dosage_grams <= 0 or reference_dosage <= 0:
        return 0.0
    return math.sqrt(dosage_grams / reference_dosage)


def dominant_flavor(entry: CatalogEntry, catalog: CatalogSnapshot) -> Tuple[Flavor, float]:
    """取系数绝对值最大的主味；并列时取药典中先出现者"""
    best_flavor = entry.flavors[0]
    best_weight = catalog.flavor_weights.get(best_flavor, 1.0)
    for flavor in entry.flavors[1:]:
        weight = catalog.flavor_weights.get(flavor, 1.0)
        if abs(weight) > abs(best_weight):
            best_flavor, best_weight = flavor, weight
    return best_flavor, best_weight


def temperature_for_value(value: float, catalog: CatalogSnapshot) -> Temperature:
    """修正寒热值对应的最近四气等级，等距时取离平更远者"""
    return min(catalog.thermal_values.items(), key=lambda item: (abs(item[1] - value), -abs(item[1])))[0]


class EnergeticsCalculator:
    """单味药寒热贡献计算器"""

    def __init__(self, catalog: CatalogSnapshot,
                 fallback_reference_dosage: Optional[float] = None,
                 scale_bound: Optional[int] = None):
        self.catalog = catalog
        self.fallback_reference_dosage = fallback_reference_dosage or ENERGETICS_CONFIG["fallback_reference_dosage"]
        self.scale_bound = scale_bound or ENERGETICS_CONFIG["thermal_scale_bound"]

    def reference_dosage(self, entry: CatalogEntry) -> float:
        return entry.default_dosage or self.fallback_reference_dosage

    def contribution(self, herb: ResolvedHerb) -> HerbContribution:
        """计算单味药贡献；未收录或剂量为零时数值全部为0"""
        raw = herb.raw
        dosage = raw.dosage_grams
        zero_dosage = dosage == 0

        if not herb.is_resolved:
            return HerbContribution(
                name=herb.core_name,
                display_name=raw.name,
                dosage_grams=dosage,
                resolved=False,
                match_kind=herb.match_kind,
                processing=herb.processing,
                mapped_from=herb.mapped_from,
                zero_dosage=zero_dosage,
                needs_completion=True,
            )

        entry = herb.entry
        base_heat = float(self.catalog.thermal_values.get(entry.temperature, 0))
        delta = self.catalog.processing_deltas.get(herb.processing, 0.0) if herb.processing else 0.0
        corrected = clamp(base_heat + delta, -self.scale_bound, self.scale_bound)

        flavor, flavor_weight = dominant_flavor(entry, self.catalog)
        ratio = damped_ratio(dosage, self.reference_dosage(entry))
        index = corrected * abs(flavor_weight) * ratio

        vector = Vector2D(
            x=self.catalog.flavor_vector_x.get(flavor, 0.0) * ratio,
            y=self.catalog.direction_vector_y.get(entry.direction, 0.0) * ratio,
        )

        logger.debug(
            f"{raw.name}: HV={base_heat:+.1f}{delta:+.1f}→{corrected:+.2f}, "
            f"WF={flavor_weight}, DR={ratio:.3f}, 贡献={index:+.3f}"
        )

        return HerbContribution(
            name=entry.name,
            display_name=raw.name,
            dosage_grams=dosage,
            resolved=True,
            match_kind=herb.match_kind,
            processing=herb.processing,
            mapped_from=herb.mapped_from,
            temperature=entry.temperature,
            display_temperature=temperature_for_value(corrected, self.catalog).value,
            primary_flavor=flavor,
            channels=entry.channels,
            direction=entry.direction,
            base_heat=base_heat,
            processing_delta=delta,
            corrected_heat=corrected,
            flavor_weight=flavor_weight,
            dosage_ratio=ratio,
            index_contribution=index,
            region_weights=region_weights_for(entry, self.catalog),
            vector=vector,
            zero_dosage=zero_dosage,
        )
