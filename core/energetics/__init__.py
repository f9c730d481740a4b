#!/usr/bin/env python3
"""
处方寒热能量分析模块
药名解析、寒热指数、三焦分布、气机矢量、配伍检测与动力学模拟
"""

from .models import (
    Temperature,
    Flavor,
    QiDirection,
    InteractionType,
    Constitution,
    AdministrationMode,
    MatchKind,
    DiagnosticCode,
    CatalogEntry,
    RegionWeights,
    InteractionRule,
    RawHerbInput,
    ResolvedHerb,
    HerbContribution,
    RegionTotals,
    NetVector,
    InteractionMatch,
    KineticsFrame,
    Diagnostic,
    PrescriptionAnalysis
)

from .catalog import (
    CatalogError,
    CatalogSnapshot,
    build_entry,
    default_catalog,
    catalog_from_dict,
    load_catalog
)

from .herb_resolver import HerbResolver
from .classifier import classify, thermal_label
from .kinetics_simulator import simulate
from .personalization import apply_constitution, apply_administration

from .prescription_energetics import (
    calculate,
    PrescriptionEnergeticsEngine,
    get_energetics_engine
)

__all__ = [
    'Temperature',
    'Flavor',
    'QiDirection',
    'InteractionType',
    'Constitution',
    'AdministrationMode',
    'MatchKind',
    'DiagnosticCode',
    'CatalogEntry',
    'RegionWeights',
    'InteractionRule',
    'RawHerbInput',
    'ResolvedHerb',
    'HerbContribution',
    'RegionTotals',
    'NetVector',
    'InteractionMatch',
    'KineticsFrame',
    'Diagnostic',
    'PrescriptionAnalysis',
    'CatalogError',
    'CatalogSnapshot',
    'build_entry',
    'default_catalog',
    'catalog_from_dict',
    'load_catalog',
    'HerbResolver',
    'classify',
    'thermal_label',
    'simulate',
    'apply_constitution',
    'apply_administration',
    'calculate',
    'PrescriptionEnergeticsEngine',
    'get_energetics_engine'
]
