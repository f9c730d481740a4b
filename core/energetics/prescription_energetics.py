#!/usr/bin/env python3
"""
处方寒热能量分析引擎
药名解析 → 单味药贡献 → 三焦分布 / 合力矢量 / 配伍检测 → 动力学模拟 → 寒热分级

引擎无状态、无I/O：每次调用只读取传入的目录快照，可并发调用
"""

import math
import logging
import threading
from dataclasses import replace
from typing import Iterable, List, Optional, Tuple

from config.settings import ENERGETICS_CONFIG, PATHS
from .catalog import CatalogSnapshot, default_catalog, load_catalog
from .classifier import classify, thermal_label
from .energetics_calculator import EnergeticsCalculator
from .herb_resolver import HerbResolver
from .kinetics_simulator import simulate
from .models import (
    RawHerbInput, ResolvedHerb, HerbContribution, PrescriptionAnalysis,
    Diagnostic, DiagnosticCode
)
from .pair_detector import detect_pairs
from .region_distributor import distribute
from .vector_aggregator import aggregate

logger = logging.getLogger(__name__)


def validate_inputs(raw_herbs: Iterable[RawHerbInput]) -> Tuple[List[Tuple[int, RawHerbInput]], List[Diagnostic]]:
    """
    过滤格式错误的条目

    空药名、负剂量、非有限剂量的条目被剔除并记录诊断；零剂量保留但标记
    """
    accepted = []
    diagnostics = []
    for index, raw in enumerate(raw_herbs):
        name = (raw.name or "").strip()
        if not name:
            diagnostics.append(Diagnostic(index, raw.name or "", DiagnosticCode.EMPTY_NAME, "药名为空，已忽略"))
            continue

        try:
            dosage = float(raw.dosage_grams)
        except (TypeError, ValueError):
            dosage = float("nan")

        if not math.isfinite(dosage):
            diagnostics.append(Diagnostic(index, name, DiagnosticCode.INVALID_DOSAGE, f"{name} 剂量无效，已忽略"))
            continue
        if dosage < 0:
            diagnostics.append(Diagnostic(index, name, DiagnosticCode.NEGATIVE_DOSAGE, f"{name} 剂量为负数，已忽略"))
            continue
        if dosage == 0:
            diagnostics.append(Diagnostic(index, name, DiagnosticCode.ZERO_DOSAGE, f"{name} 剂量为0，不参与计算"))

        accepted.append((index, replace(raw, name=name, dosage_grams=dosage)))

    for diagnostic in diagnostics:
        if diagnostic.code is not DiagnosticCode.ZERO_DOSAGE:
            logger.warning(f"⚠️ 第{diagnostic.index + 1}味药: {diagnostic.message}")
    return accepted, diagnostics


def _resolution_diagnostics(index: int, herb: ResolvedHerb) -> Optional[Diagnostic]:
    if herb.is_resolved:
        return None
    if herb.candidates:
        return Diagnostic(index, herb.raw.name, DiagnosticCode.AMBIGUOUS,
                          f"{herb.raw.name} 匹配到多个药材: {'、'.join(herb.candidates)}，请补全药名")
    return Diagnostic(index, herb.raw.name, DiagnosticCode.UNRESOLVED,
                      f"{herb.raw.name} 未收录，可使用补全功能添加药性数据")


def calculate(raw_herbs: Iterable[RawHerbInput],
              catalog: CatalogSnapshot,
              reference_total_dosage: Optional[float] = None,
              top_n: Optional[int] = None) -> PrescriptionAnalysis:
    """
    计算处方寒热能量

    Args:
        raw_herbs: 分词得到的药材列表（剂量已换算为克）
        catalog: 参考目录快照
        reference_total_dosage: 参考总剂量；为空时取本次有效剂量之和
        top_n: 贡献度排行长度

    Returns:
        PrescriptionAnalysis，全部未收录时返回全零结果
    """
    if top_n is None:
        top_n = ENERGETICS_CONFIG["top_n"]
    accepted, diagnostics = validate_inputs(raw_herbs)

    resolver = HerbResolver(catalog)
    calculator = EnergeticsCalculator(catalog)

    resolved: List[ResolvedHerb] = []
    contributions: List[HerbContribution] = []
    for index, raw in accepted:
        herb = resolver.resolve(raw)
        resolved.append(herb)
        note = _resolution_diagnostics(index, herb)
        if note:
            diagnostics.append(note)
        contributions.append(calculator.contribution(herb))

    total_index = sum(h.index_contribution for h in contributions)
    total_dosage = sum(raw.dosage_grams for _, raw in accepted)
    if reference_total_dosage is not None and reference_total_dosage > 0:
        total_dosage = float(reference_total_dosage)

    regions = distribute(contributions)
    net_vector = aggregate(contributions)
    interactions = detect_pairs(resolved, catalog.interaction_rules)
    kinetics = simulate(total_index, net_vector, total_dosage)

    ranked = sorted(
        (h for h in contributions if h.resolved),
        key=lambda h: abs(h.index_contribution),
        reverse=True,
    )

    label = classify(total_index)
    resolved_count = sum(1 for h in resolved if h.is_resolved)
    logger.info(
        f"处方寒热分析完成: 共{len(contributions)}味，已收录{resolved_count}味，"
        f"总指数={total_index:+.3f}，分级={label}"
    )

    return PrescriptionAnalysis(
        total_index=total_index,
        reference_total_dosage=total_dosage,
        label=label,
        thermal_label=thermal_label(total_index),
        herbs=tuple(contributions),
        top_contributors=tuple(ranked[:top_n]),
        regions=regions,
        interactions=tuple(interactions),
        net_vector=net_vector,
        kinetics=tuple(kinetics),
        diagnostics=tuple(sorted(diagnostics, key=lambda d: d.index)),
    )


class PrescriptionEnergeticsEngine:
    """
    持有当前目录快照的引擎门面

    refresh() 以新快照整体替换旧快照；正在进行的计算继续使用调用时取到的快照
    """

    def __init__(self, catalog: Optional[CatalogSnapshot] = None):
        self._catalog = catalog
        self._lock = threading.Lock()

    @property
    def catalog(self) -> CatalogSnapshot:
        with self._lock:
            if self._catalog is None:
                self._catalog = self._load_default_catalog()
            return self._catalog

    @staticmethod
    def _load_default_catalog() -> CatalogSnapshot:
        catalog_path = PATHS["herb_catalog"]
        if catalog_path.exists():
            return load_catalog(catalog_path)
        logger.info("未找到外部药材目录，使用内置目录")
        return default_catalog()

    def refresh(self, catalog: CatalogSnapshot):
        with self._lock:
            self._catalog = catalog
        logger.info(f"药材目录已刷新: {len(catalog)} 味")

    def resolve(self, name: str, processing_method: Optional[str] = None) -> ResolvedHerb:
        return HerbResolver(self.catalog).resolve(RawHerbInput(name=name, dosage_grams=0.0,
                                                               processing_method=processing_method))

    def calculate(self, raw_herbs: Iterable[RawHerbInput],
                  reference_total_dosage: Optional[float] = None) -> PrescriptionAnalysis:
        return calculate(raw_herbs, self.catalog, reference_total_dosage=reference_total_dosage)


_engine: Optional[PrescriptionEnergeticsEngine] = None


def get_energetics_engine() -> PrescriptionEnergeticsEngine:
    """获取全局引擎实例"""
    global _engine
    if _engine is None:
        _engine = PrescriptionEnergeticsEngine()
    return _engine
