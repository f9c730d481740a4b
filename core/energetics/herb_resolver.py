#!/usr/bin/env python3
"""
药名解析器
将分词得到的药名（可能带炮制前缀、别名、俗称）映射到参考目录条目

解析顺序：
1. 原名精确匹配（炮制品自身收录，如 炮姜、炙甘草）
2. 原名别名匹配
3. 剥离炮制标记得到核心药名，再精确匹配
4. 核心药名别名匹配
5. 前缀/子串模糊匹配，唯一候选才采用
炮制品同时记录原药名（base_name），配伍规则按原药名匹配
未命中不是错误：返回未解析结果，由调用方提示"AI补全"
"""

import re
import logging
from typing import List, Optional, Tuple

from config.settings import ENERGETICS_CONFIG
from .catalog import CatalogSnapshot
from .models import RawHerbInput, ResolvedHerb, MatchKind

logger = logging.getLogger(__name__)

# 括注炮制方法，如 白术(炒)、白术（麸炒）
_BRACKET_PATTERN = re.compile(r'[（(]\s*([^）)]+?)\s*[）)]')


class HerbResolver:
    """药名 → 参考目录条目"""

    def __init__(self, catalog: CatalogSnapshot, min_partial_length: Optional[int] = None):
        self.catalog = catalog
        if min_partial_length is None:
            min_partial_length = ENERGETICS_CONFIG["partial_match_min_length"]
        self.min_partial_length = min_partial_length
        # 长标记优先，避免 "蜜炙" 被拆成 "蜜"
        self._prefix_tokens = sorted(catalog.processing_deltas.keys(), key=len, reverse=True)
        self._suffix_tokens = sorted(catalog.suffix_tokens, key=len, reverse=True)

    def split_processing(self, raw_name: str) -> Tuple[str, Optional[str]]:
        """
        剥离炮制标记

        Returns:
            (核心药名, 炮制标记或None)
        """
        name = raw_name.strip()

        bracket = _BRACKET_PATTERN.search(name)
        if bracket:
            token = bracket.group(1)
            core = _BRACKET_PATTERN.sub('', name).strip()
            if token in self.catalog.processing_deltas and core:
                return core, token
            name = core or name

        for token in self._suffix_tokens:
            if name.endswith(token) and len(name) > len(token):
                return name[:-len(token)], token

        for token in self._prefix_tokens:
            if name.startswith(token) and len(name) > len(token):
                return name[len(token):], token

        return name, None

    def _lookup(self, name: str) -> Tuple[Optional[str], MatchKind]:
        if name in self.catalog.entries:
            return name, MatchKind.EXACT
        target = self.catalog.aliases.get(name)
        if target and target in self.catalog.entries:
            return target, MatchKind.ALIAS
        return None, MatchKind.UNRESOLVED

    def _partial_candidates(self, core_name: str) -> List[str]:
        if len(core_name) < self.min_partial_length:
            return []
        candidates = []
        for name in self.catalog.entries:
            shorter = min(len(name), len(core_name))
            if shorter < self.min_partial_length:
                continue
            if name.startswith(core_name) or core_name in name or name in core_name:
                candidates.append(name)
        return candidates

    def base_name_of(self, name: str) -> str:
        """炮制品对应的原药名：先查炮制品表，再尝试剥离炮制标记；非炮制品返回自身"""
        base = self.catalog.product_bases.get(name)
        if base:
            return base
        stripped, token = self.split_processing(name)
        if token:
            matched, _ = self._lookup(stripped)
            if matched:
                return matched
        return name

    def is_processed_product(self, name: str) -> bool:
        return self.base_name_of(name) != name

    def resolve(self, raw: RawHerbInput) -> ResolvedHerb:
        """解析单味药"""
        display_name = (raw.name or "").strip()
        explicit_processing = raw.processing_method or None

        # 1-2. 原名（含炮制品名）直接命中
        matched, kind = self._lookup(display_name)
        if matched:
            processing = explicit_processing
            if processing and self.is_processed_product(matched):
                # 炮制品寒热已按成品收录，不再叠加炮制修正
                logger.debug(f"炮制品 {matched} 忽略炮制标记 {processing}")
                processing = None
            return ResolvedHerb(
                raw=raw,
                core_name=matched,
                entry=self.catalog.entries[matched],
                processing=processing,
                match_kind=kind,
                mapped_from=display_name if kind is MatchKind.ALIAS else raw.mapped_from,
                base_name=self.base_name_of(matched),
            )

        # 3-4. 剥离炮制标记后命中
        core_name, token = self.split_processing(display_name)
        processing = explicit_processing or token
        if token:
            matched, kind = self._lookup(core_name)
            if matched:
                return ResolvedHerb(
                    raw=raw,
                    core_name=matched,
                    entry=self.catalog.entries[matched],
                    processing=processing,
                    match_kind=MatchKind.PROCESSED if kind is MatchKind.EXACT else MatchKind.ALIAS,
                    mapped_from=core_name if kind is MatchKind.ALIAS else raw.mapped_from,
                    base_name=self.base_name_of(matched),
                )

        # 5. 模糊匹配
        candidates = self._partial_candidates(core_name)
        if len(candidates) == 1:
            matched = candidates[0]
            logger.info(f"药名模糊匹配: {display_name} → {matched}")
            return ResolvedHerb(
                raw=raw,
                core_name=matched,
                entry=self.catalog.entries[matched],
                processing=processing,
                match_kind=MatchKind.PARTIAL,
                mapped_from=display_name,
                base_name=self.base_name_of(matched),
            )

        if candidates:
            logger.warning(f"⚠️ 药名 {display_name} 匹配到多个候选 {candidates}，按未收录处理")
        else:
            logger.warning(f"⚠️ 药材未收录: {display_name}")

        return ResolvedHerb(
            raw=raw,
            core_name=display_name,
            entry=None,
            processing=processing,
            match_kind=MatchKind.UNRESOLVED,
            mapped_from=raw.mapped_from,
            candidates=tuple(candidates),
        )

    def resolve_all(self, raw_herbs: List[RawHerbInput]) -> List[ResolvedHerb]:
        return [self.resolve(raw) for raw in raw_herbs]
