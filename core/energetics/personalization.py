#!/usr/bin/env python3
"""
个体化后处理（可选）
体质修正与服药方式修正不进入主计算流程，只对已完成的分析结果做二次加工
"""

import logging
from dataclasses import replace
from typing import Any, Dict, Optional

from .classifier import classify, thermal_label
from .kinetics_simulator import simulate
from .models import PrescriptionAnalysis, Constitution, AdministrationMode
from .reference_tables import CONSTITUTION_MODIFIERS, ADMINISTRATION_PHYSICS
from .region_distributor import distribute

logger = logging.getLogger(__name__)


def apply_constitution(analysis: PrescriptionAnalysis,
                       constitution: Constitution,
                       modifiers: Optional[Dict[Constitution, Dict[str, float]]] = None) -> PrescriptionAnalysis:
    """按体质缩放温热/寒凉贡献并重算总指数、三焦、排行、动力学与分级"""
    modifier = (modifiers or CONSTITUTION_MODIFIERS).get(constitution)
    if not modifier or (modifier["heat_mult"] == 1.0 and modifier["cold_mult"] == 1.0):
        return analysis

    herbs = []
    for herb in analysis.herbs:
        if herb.index_contribution > 0:
            herb = replace(herb, index_contribution=herb.index_contribution * modifier["heat_mult"])
        elif herb.index_contribution < 0:
            herb = replace(herb, index_contribution=herb.index_contribution * modifier["cold_mult"])
        herbs.append(herb)

    total_index = sum(h.index_contribution for h in herbs)
    top_n = len(analysis.top_contributors)
    ranked = sorted((h for h in herbs if h.resolved), key=lambda h: abs(h.index_contribution), reverse=True)

    logger.info(f"体质修正({constitution.value}): 总指数 {analysis.total_index:+.3f} → {total_index:+.3f}")

    return replace(
        analysis,
        total_index=total_index,
        label=classify(total_index),
        thermal_label=thermal_label(total_index),
        herbs=tuple(herbs),
        top_contributors=tuple(ranked[:top_n]),
        regions=distribute(herbs),
        kinetics=tuple(simulate(total_index, analysis.net_vector, analysis.reference_total_dosage)),
    )


def apply_administration(analysis: PrescriptionAnalysis,
                         mode: AdministrationMode,
                         physics: Optional[Dict[AdministrationMode, Dict[str, Any]]] = None) -> PrescriptionAnalysis:
    """按服药方式重跑动力学模拟"""
    setting = (physics or ADMINISTRATION_PHYSICS).get(mode)
    if not setting or (setting["middle_boost"] == 0 and setting["rate_mult"] == 1.0):
        return analysis

    kinetics = simulate(
        analysis.total_index,
        analysis.net_vector,
        analysis.reference_total_dosage,
        middle_boost=setting["middle_boost"],
        rate_mult=setting["rate_mult"],
    )
    logger.info(f"服药方式修正: {mode.value}（{setting.get('note', '')}）")
    return replace(analysis, kinetics=tuple(kinetics))
