#!/usr/bin/env python3
"""
寒热分级
classify: 五档定性标签（阈值见 config.settings.CLASSIFIER_BANDS）
thermal_label: 报告中使用的十一级四气描述
"""

from typing import Dict, Optional

from config.settings import CLASSIFIER_BANDS

STRONGLY_WARMING = "strongly warming"
MILDLY_WARMING = "mildly warming"
BALANCED = "balanced"
MILDLY_COOLING = "mildly cooling"
STRONGLY_COOLING = "strongly cooling"

LABELS_ZH = {
    STRONGLY_WARMING: "大温",
    MILDLY_WARMING: "偏温",
    BALANCED: "平和",
    MILDLY_COOLING: "偏凉",
    STRONGLY_COOLING: "大寒凉",
}


def classify(total_index: float, bands: Optional[Dict[str, float]] = None) -> str:
    """边界值归入离零更远的一档"""
    bands = bands or CLASSIFIER_BANDS
    strong = bands["strong_threshold"]
    mild = bands["mild_threshold"]

    if total_index >= strong:
        return STRONGLY_WARMING
    if total_index >= mild:
        return MILDLY_WARMING
    if total_index <= -strong:
        return STRONGLY_COOLING
    if total_index <= -mild:
        return MILDLY_COOLING
    return BALANCED


# (界值, 标签)：温侧取首个 value >= 界值，寒侧取首个 value <= 界值
_WARM_STEPS = ((4.0, '大热'), (3.0, '热'), (2.0, '温'), (1.0, '微温'), (0.5, '平偏温'))
_COLD_STEPS = ((-4.0, '大寒'), (-3.0, '寒'), (-2.0, '凉'), (-1.0, '微寒'), (-0.5, '平偏凉'))


def thermal_label(value: float) -> str:
    """十一级四气描述"""
    for bound, label in _WARM_STEPS:
        if value >= bound:
            return label
    for bound, label in _COLD_STEPS:
        if value <= bound:
            return label
    return '平'
