#!/usr/bin/env python3
"""
药对配伍检测
规则所需药材全部出现在已解析药名集合中即触发；不设优先级，一味药可参与多条规则
炮制品（炙甘草、黑顺片等）同时以原药名参与匹配
"""

import logging
from typing import Iterable, List, Set, Tuple

from .models import InteractionRule, InteractionMatch, ResolvedHerb

logger = logging.getLogger(__name__)


def present_names(resolved_herbs: Iterable[ResolvedHerb]) -> Set[str]:
    """已解析药材的正名与原药名集合"""
    names = set()
    for herb in resolved_herbs:
        if not herb.is_resolved:
            continue
        names.add(herb.core_name)
        if herb.base_name:
            names.add(herb.base_name)
    return names


def detect_pairs(resolved_herbs: Iterable[ResolvedHerb],
                 rules: Tuple[InteractionRule, ...]) -> List[InteractionMatch]:
    """返回所有触发的配伍，顺序与规则表一致（与输入顺序无关）"""
    present = present_names(resolved_herbs)
    matches = []
    for rule in rules:
        if all(name in present for name in rule.herbs):
            matches.append(InteractionMatch(
                label=rule.label,
                effect=rule.effect,
                interaction_type=rule.interaction_type,
                herbs=rule.herbs,
                description=rule.description,
            ))

    if matches:
        logger.info(f"检测到配伍 {len(matches)} 组: {', '.join(m.label for m in matches)}")
    return matches
