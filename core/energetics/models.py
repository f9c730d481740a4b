#!/usr/bin/env python3
"""
处方寒热能量分析 - 数据结构定义
药材静态数据、输入、单味药贡献、三焦分布、合力矢量、配伍与动力学结果
"""

from enum import Enum
from dataclasses import dataclass, field, asdict
from typing import Dict, List, Optional, Tuple, Any


class Temperature(Enum):
    """四气九分（大热 → 大寒，以平为中心对称）"""
    GREAT_HEAT = "大热"
    HEAT = "热"
    WARM = "温"
    SLIGHTLY_WARM = "微温"
    NEUTRAL = "平"
    SLIGHTLY_COLD = "微寒"
    COOL = "凉"
    COLD = "寒"
    GREAT_COLD = "大寒"


class Flavor(Enum):
    """五味（含涩、淡共七味）"""
    PUNGENT = "辛"
    BITTER = "苦"
    SALTY = "咸"
    SOUR = "酸"
    ASTRINGENT = "涩"
    SWEET = "甘"
    BLAND = "淡"


class QiDirection(Enum):
    """升降浮沉"""
    LIFTING = "升浮"
    SINKING = "沉降"
    NEUTRAL = "中转"


class InteractionType(Enum):
    """配伍关系类型"""
    SYNERGY = "synergy"
    ANTAGONISM = "antagonism"
    MODIFIER = "modifier"


class Constitution(Enum):
    """体质"""
    NEUTRAL = "平和质"
    YANG_DEFICIENCY = "阳虚质"
    YIN_DEFICIENCY = "阴虚质"
    PHLEGM_DAMPNESS = "痰湿质"
    QI_STAGNATION = "气郁质"


class AdministrationMode(Enum):
    """服药方式"""
    STANDARD = "常规温服"
    HOT_PORRIDGE = "啜热粥助汗"
    COLD_SERVE = "凉服"
    EMPTY_STOMACH = "空腹顿服"
    POST_MEAL = "饭后服"
    FREQUENT = "少量频服"


class MatchKind(Enum):
    """药名解析方式"""
    EXACT = "exact"
    ALIAS = "alias"
    PROCESSED = "processed"  # 去除炮制前缀后命中
    PARTIAL = "partial"  # 前缀/子串模糊命中
    UNRESOLVED = "unresolved"


class DiagnosticCode(Enum):
    """单味药诊断代码"""
    EMPTY_NAME = "EMPTY_NAME"
    NEGATIVE_DOSAGE = "NEGATIVE_DOSAGE"
    INVALID_DOSAGE = "INVALID_DOSAGE"
    ZERO_DOSAGE = "ZERO_DOSAGE"
    UNRESOLVED = "UNRESOLVED"
    AMBIGUOUS = "AMBIGUOUS"


@dataclass(frozen=True)
class RegionWeights:
    """三焦权重（上、中、下），和为1"""
    upper: float = 0.0
    middle: float = 1.0
    lower: float = 0.0

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.upper, self.middle, self.lower)


@dataclass(frozen=True)
class CatalogEntry:
    """药材静态数据（由外部药典同步提供，核心只读）"""
    name: str
    temperature: Temperature
    flavors: Tuple[Flavor, ...]
    channels: Tuple[str, ...] = ()
    direction: QiDirection = QiDirection.NEUTRAL
    default_dosage: Optional[float] = None
    region_weights: Optional[RegionWeights] = None
    efficacy: str = ""
    usage: str = ""


@dataclass(frozen=True)
class InteractionRule:
    """配伍规则：所需药材全部出现即触发"""
    herbs: Tuple[str, ...]
    label: str
    effect: str
    interaction_type: InteractionType
    description: str = ""


@dataclass(frozen=True)
class RawHerbInput:
    """分词器输出的单味药（剂量已换算为克）"""
    name: str
    dosage_grams: float
    processing_method: Optional[str] = None
    mapped_from: Optional[str] = None


@dataclass(frozen=True)
class ResolvedHerb:
    """药名解析结果；entry为None表示未收录（仅展示，不参与计算）"""
    raw: RawHerbInput
    core_name: str
    entry: Optional[CatalogEntry] = None
    processing: Optional[str] = None
    match_kind: MatchKind = MatchKind.UNRESOLVED
    mapped_from: Optional[str] = None
    candidates: Tuple[str, ...] = ()
    base_name: Optional[str] = None  # 炮制品对应的原药名，配伍检测使用

    @property
    def is_resolved(self) -> bool:
        return self.entry is not None


@dataclass(frozen=True)
class Vector2D:
    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class HerbContribution:
    """单味药寒热贡献记录"""
    name: str
    display_name: str
    dosage_grams: float
    resolved: bool
    match_kind: MatchKind
    processing: Optional[str] = None
    mapped_from: Optional[str] = None
    temperature: Optional[Temperature] = None
    display_temperature: str = ""
    primary_flavor: Optional[Flavor] = None
    channels: Tuple[str, ...] = ()
    direction: Optional[QiDirection] = None
    base_heat: float = 0.0
    processing_delta: float = 0.0
    corrected_heat: float = 0.0
    flavor_weight: float = 0.0
    dosage_ratio: float = 0.0
    index_contribution: float = 0.0
    region_weights: RegionWeights = field(default_factory=RegionWeights)
    vector: Vector2D = field(default_factory=Vector2D)
    zero_dosage: bool = False
    needs_completion: bool = False


@dataclass(frozen=True)
class RegionTotal:
    energy: float = 0.0
    percentage: float = 0.0


@dataclass(frozen=True)
class RegionTotals:
    """三焦分布"""
    upper: RegionTotal = field(default_factory=RegionTotal)
    middle: RegionTotal = field(default_factory=RegionTotal)
    lower: RegionTotal = field(default_factory=RegionTotal)


@dataclass(frozen=True)
class NetVector:
    """处方合力矢量：x 散(+)/收(-)，y 升(+)/降(-)"""
    x: float = 0.0
    y: float = 0.0
    magnitude: float = 0.0
    angle: float = 0.0


@dataclass(frozen=True)
class InteractionMatch:
    label: str
    effect: str
    interaction_type: InteractionType
    herbs: Tuple[str, ...]
    description: str = ""


@dataclass(frozen=True)
class KineticsFrame:
    """动力学采样点：上焦(卫气) / 中焦(谷气) / 下焦(营阴)"""
    time: int
    q_upper: float
    q_middle: float
    q_lower: float


@dataclass(frozen=True)
class Diagnostic:
    index: int
    herb_name: str
    code: DiagnosticCode
    message: str


@dataclass(frozen=True)
class PrescriptionAnalysis:
    """一次计算的完整结果"""
    total_index: float
    reference_total_dosage: float
    label: str
    thermal_label: str
    herbs: Tuple[HerbContribution, ...]
    top_contributors: Tuple[HerbContribution, ...]
    regions: RegionTotals
    interactions: Tuple[InteractionMatch, ...]
    net_vector: NetVector
    kinetics: Tuple[KineticsFrame, ...]
    diagnostics: Tuple[Diagnostic, ...] = ()

    @property
    def unresolved_herbs(self) -> List[str]:
        """需要补全药性数据的药名"""
        return [h.display_name for h in self.herbs if h.needs_completion]

    def to_dict(self) -> Dict[str, Any]:
        """转换为可JSON序列化的字典"""
        return _jsonable(asdict(self))


def _jsonable(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {k: _jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    return value
