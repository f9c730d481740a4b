#!/usr/bin/env python3
"""
药材参考目录（只读快照）
负责将药典体例的原始记录转换为 CatalogEntry，并打包全部查找表

每次计算都基于一个不可变快照；外部同步刷新时生成新快照，而不是原地修改
"""

import json
import logging
import math
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Any, Iterable, Union

from .models import (
    Temperature, Flavor, QiDirection, InteractionType, InteractionRule,
    CatalogEntry, RegionWeights
)
from . import reference_tables as tables

logger = logging.getLogger(__name__)


class CatalogError(ValueError):
    """参考目录数据无效或无法读取"""


@dataclass(frozen=True)
class CatalogSnapshot:
    """一次计算所用的参考数据快照"""
    entries: Dict[str, CatalogEntry]
    aliases: Dict[str, str] = field(default_factory=lambda: dict(tables.HERB_ALIASES))
    product_bases: Dict[str, str] = field(default_factory=lambda: dict(tables.PROCESSED_PRODUCT_BASES))
    processing_deltas: Dict[str, float] = field(default_factory=lambda: dict(tables.PROCESSING_DELTAS))
    suffix_tokens: Tuple[str, ...] = tables.SUFFIX_PROCESSING_TOKENS
    channel_regions: Tuple[Tuple[str, Tuple[str, ...]], ...] = tables.CHANNEL_REGIONS
    thermal_values: Dict[Temperature, int] = field(default_factory=lambda: dict(tables.THERMAL_VALUES))
    flavor_weights: Dict[Flavor, float] = field(default_factory=lambda: dict(tables.FLAVOR_WEIGHTS))
    flavor_vector_x: Dict[Flavor, float] = field(default_factory=lambda: dict(tables.FLAVOR_VECTOR_X))
    direction_vector_y: Dict[QiDirection, float] = field(default_factory=lambda: dict(tables.DIRECTION_VECTOR_Y))
    interaction_rules: Tuple[InteractionRule, ...] = tables.INTERACTION_RULES

    def get(self, name: str) -> Optional[CatalogEntry]:
        return self.entries.get(name)

    def names(self) -> List[str]:
        return list(self.entries.keys())

    def __len__(self) -> int:
        return len(self.entries)

    def with_entries(self, entries: Iterable[CatalogEntry]) -> "CatalogSnapshot":
        """合并新药材，返回新快照（原快照不变）"""
        merged = dict(self.entries)
        for entry in entries:
            merged[entry.name] = entry
        return replace(self, entries=merged)

    def search(self, term: str, limit: int = 8) -> List[CatalogEntry]:
        """按药名、别名、功效、药性检索"""
        term = (term or "").strip()
        if not term:
            return []

        alias_hits = {core for alias, core in self.aliases.items() if term in alias}
        matches = []
        for entry in self.entries.values():
            if (term in entry.name
                    or entry.name in alias_hits
                    or term in entry.efficacy
                    or term == entry.temperature.value):
                matches.append(entry)
            if len(matches) >= limit:
                break
        return matches


# ==========================================
# 药典原始字段 → 枚举
# ==========================================

def map_nature(nature: str) -> Temperature:
    """四气文本转枚举：先判定"大/微"修饰，再判定单字；无法识别（含缺失）时报错"""
    if not isinstance(nature, str):
        raise CatalogError(f"四气必须是文本: {nature!r}")
    if '大热' in nature:
        return Temperature.GREAT_HEAT
    if '大寒' in nature:
        return Temperature.GREAT_COLD
    if '微温' in nature:
        return Temperature.SLIGHTLY_WARM
    if '微寒' in nature:
        return Temperature.SLIGHTLY_COLD
    if '热' in nature:
        return Temperature.HEAT
    if '凉' in nature:
        return Temperature.COOL
    if '寒' in nature:
        return Temperature.COLD
    if '温' in nature:
        return Temperature.WARM
    if '平' in nature:
        return Temperature.NEUTRAL
    raise CatalogError(f"无法识别的四气: {nature!r}")


def map_flavors(flavors: Iterable[str]) -> Tuple[Flavor, ...]:
    """五味文本转枚举，保留出现顺序并去重；无可识别者视为淡味"""
    mapped: List[Flavor] = []
    for text in flavors or []:
        for flavor in Flavor:
            if flavor.value in text and flavor not in mapped:
                mapped.append(flavor)
    return tuple(mapped) if mapped else (Flavor.BLAND,)


_WARM_CLASSES = (Temperature.GREAT_HEAT, Temperature.HEAT, Temperature.WARM, Temperature.SLIGHTLY_WARM)
_COLD_CLASSES = (Temperature.GREAT_COLD, Temperature.COLD, Temperature.COOL, Temperature.SLIGHTLY_COLD)


def estimate_direction(temperature: Temperature, flavors: Tuple[Flavor, ...]) -> QiDirection:
    """根据气味估算升降浮沉：温热辛甘主升浮，寒凉苦咸酸主沉降"""
    score = 0.0
    if temperature in _WARM_CLASSES:
        score += 1
    if temperature in _COLD_CLASSES:
        score -= 1

    if Flavor.PUNGENT in flavors:
        score += 1
    if Flavor.SWEET in flavors:
        score += 0.5
    if Flavor.BITTER in flavors:
        score -= 1
    if Flavor.SALTY in flavors:
        score -= 1
    if Flavor.SOUR in flavors:
        score -= 0.5

    if score > 0.5:
        return QiDirection.LIFTING
    if score < -0.5:
        return QiDirection.SINKING
    return QiDirection.NEUTRAL


def _parse_region_weights(name: str, raw: Any) -> Optional[RegionWeights]:
    if raw is None:
        return None
    try:
        if isinstance(raw, dict):
            weights = RegionWeights(float(raw.get("upper", 0)), float(raw.get("middle", 0)), float(raw.get("lower", 0)))
        else:
            upper, middle, lower = raw
            weights = RegionWeights(float(upper), float(middle), float(lower))
    except (TypeError, ValueError) as e:
        raise CatalogError(f"药材 {name} 的三焦权重格式错误: {raw}") from e

    if any(w < 0 for w in weights.as_tuple()):
        raise CatalogError(f"药材 {name} 的三焦权重不能为负: {raw}")
    if not math.isclose(sum(weights.as_tuple()), 1.0, abs_tol=1e-6):
        raise CatalogError(f"药材 {name} 的三焦权重之和必须为1: {raw}")
    return weights


def build_entry(record: Dict[str, Any]) -> CatalogEntry:
    """由药典体例记录构建 CatalogEntry"""
    if not isinstance(record, dict):
        raise CatalogError(f"药材记录必须是对象: {record!r}")
    name = record.get("name") or ""
    if not isinstance(name, str) or not name.strip():
        raise CatalogError(f"药材记录缺少名称: {record}")
    name = name.strip()

    try:
        temperature = map_nature(record.get("nature"))
    except CatalogError as e:
        raise CatalogError(f"药材 {name} 的四气无效: {e}") from e
    flavor_texts = record.get("flavors") or []
    if not isinstance(flavor_texts, list) or not all(isinstance(t, str) for t in flavor_texts):
        raise CatalogError(f"药材 {name} 的五味必须是文本列表: {flavor_texts!r}")
    flavors = map_flavors(flavor_texts)

    direction_raw = record.get("direction")
    if direction_raw:
        try:
            direction = QiDirection(direction_raw)
        except ValueError as e:
            raise CatalogError(f"药材 {name} 的升降浮沉取值无效: {direction_raw}") from e
    else:
        direction = estimate_direction(temperature, flavors)

    dosage = record.get("default_dosage")
    if dosage is not None:
        try:
            dosage = float(dosage)
        except (TypeError, ValueError) as e:
            raise CatalogError(f"药材 {name} 的默认剂量无效: {dosage}") from e
        if dosage <= 0:
            raise CatalogError(f"药材 {name} 的默认剂量必须为正数: {dosage}")

    channels = record.get("meridians") or record.get("channels") or ()
    if not isinstance(channels, (list, tuple)):
        raise CatalogError(f"药材 {name} 的归经必须是列表: {channels!r}")

    return CatalogEntry(
        name=name,
        temperature=temperature,
        flavors=flavors,
        channels=tuple(channels),
        direction=direction,
        default_dosage=dosage,
        region_weights=_parse_region_weights(name, record.get("region_weights")),
        efficacy=record.get("efficacy") or "",
        usage=record.get("usage") or "",
    )


def _parse_rule(raw: Dict[str, Any]) -> InteractionRule:
    if not isinstance(raw, dict):
        raise CatalogError(f"配伍规则必须是对象: {raw!r}")
    herbs = raw.get("herbs") or ()
    if not isinstance(herbs, (list, tuple)) or not all(isinstance(h, str) for h in herbs):
        raise CatalogError(f"配伍规则药材必须是药名列表: {herbs!r}")
    herbs = tuple(herbs)
    if len(herbs) < 2:
        raise CatalogError(f"配伍规则至少需要两味药: {raw}")
    try:
        interaction_type = InteractionType(raw.get("type", "synergy"))
    except ValueError as e:
        raise CatalogError(f"配伍规则类型无效: {raw.get('type')}") from e
    return InteractionRule(
        herbs=herbs,
        label=raw.get("label") or "、".join(herbs),
        effect=raw.get("effect", ""),
        interaction_type=interaction_type,
        description=raw.get("description", ""),
    )


def _table(data: Dict[str, Any], key: str, kind: type) -> Any:
    """取出一张表并校验其JSON类型（对象或数组）"""
    table = data[key]
    if not isinstance(table, kind):
        expected = "对象" if kind is dict else "数组"
        raise CatalogError(f"{key} 必须是JSON{expected}，实际为 {type(table).__name__}")
    return table


def _to_float(value: Any, table_name: str, key: str) -> float:
    if isinstance(value, bool):
        raise CatalogError(f"{table_name} 中存在无效数值: {key}={value}")
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise CatalogError(f"{table_name} 中存在无效数值: {key}={value}") from e


def _enum_keyed(enum_cls, raw: Dict[str, Any], table_name: str) -> Dict[Any, float]:
    result = {}
    for key, value in raw.items():
        try:
            member = enum_cls(key)
        except ValueError as e:
            raise CatalogError(f"{table_name} 中存在无效键: {key}") from e
        result[member] = _to_float(value, table_name, key)
    return result


def _name_map(raw: Dict[str, Any], table_name: str) -> Dict[str, str]:
    for key, value in raw.items():
        if not isinstance(value, str) or not value:
            raise CatalogError(f"{table_name} 中 {key} 的目标药名无效: {value!r}")
    return dict(raw)


# ==========================================
# 快照构建
# ==========================================

def default_catalog() -> CatalogSnapshot:
    """内置药材目录"""
    entries = {}
    for record in tables.DEFAULT_HERB_RECORDS:
        entry = build_entry(record)
        entries[entry.name] = entry
    return CatalogSnapshot(entries=entries)


def catalog_from_dict(data: Dict[str, Any], base: Optional[CatalogSnapshot] = None) -> CatalogSnapshot:
    """
    由外部表数据构建快照，未提供的表沿用 base（默认内置目录）

    支持的键: herbs, replace_herbs, aliases, product_bases, processing_deltas,
    channel_regions, flavor_weights, flavor_vector_x, direction_vector_y, interaction_rules

    任何结构错误（表类型不符、数值无法转换、取值越界）统一抛出 CatalogError
    """
    if not isinstance(data, dict):
        raise CatalogError("目录数据必须是JSON对象")

    base = base or default_catalog()
    changes: Dict[str, Any] = {}

    if "herbs" in data:
        new_entries = [build_entry(record) for record in _table(data, "herbs", list)]
        if data.get("replace_herbs"):
            changes["entries"] = {e.name: e for e in new_entries}
        else:
            changes["entries"] = base.with_entries(new_entries).entries

    if "aliases" in data:
        changes["aliases"] = {**base.aliases, **_name_map(_table(data, "aliases", dict), "aliases")}
    if "product_bases" in data:
        changes["product_bases"] = {
            **base.product_bases,
            **_name_map(_table(data, "product_bases", dict), "product_bases")
        }
    if "processing_deltas" in data:
        deltas = _table(data, "processing_deltas", dict)
        changes["processing_deltas"] = {
            **base.processing_deltas,
            **{k: _to_float(v, "processing_deltas", k) for k, v in deltas.items()}
        }
    if "channel_regions" in data:
        regions = _table(data, "channel_regions", dict)
        unknown = set(regions) - {"upper", "middle", "lower"}
        if unknown:
            raise CatalogError(f"未知的三焦分区: {sorted(unknown)}")
        for region, channels in regions.items():
            if not isinstance(channels, list):
                raise CatalogError(f"channel_regions 中 {region} 必须是经络列表: {channels!r}")
        changes["channel_regions"] = tuple(
            (region, tuple(regions[region])) for region in ("upper", "middle", "lower") if region in regions
        )
    if "flavor_weights" in data:
        weights = _enum_keyed(Flavor, _table(data, "flavor_weights", dict), "flavor_weights")
        changes["flavor_weights"] = {**base.flavor_weights, **weights}
    if "flavor_vector_x" in data:
        vector_x = _enum_keyed(Flavor, _table(data, "flavor_vector_x", dict), "flavor_vector_x")
        changes["flavor_vector_x"] = {**base.flavor_vector_x, **vector_x}
    if "direction_vector_y" in data:
        vector_y = _enum_keyed(QiDirection, _table(data, "direction_vector_y", dict), "direction_vector_y")
        changes["direction_vector_y"] = {**base.direction_vector_y, **vector_y}
    if "interaction_rules" in data:
        changes["interaction_rules"] = tuple(_parse_rule(r) for r in _table(data, "interaction_rules", list))

    return replace(base, **changes)


def load_catalog(path: Union[str, Path]) -> CatalogSnapshot:
    """从JSON文件加载参考目录"""
    path = Path(path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise CatalogError(f"无法读取药材目录 {path}: {e}") from e

    snapshot = catalog_from_dict(data)
    logger.info(f"✅ 已加载药材目录: {path}，共 {len(snapshot)} 味药材，{len(snapshot.interaction_rules)} 条配伍规则")
    return snapshot
