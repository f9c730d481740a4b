#!/usr/bin/env python3
"""
处方合力矢量
以各药剂量比（绝对值）为权重，对单味药矢量求加权平均；模长截断到 [0, 1]
"""

import math
from typing import Iterable

import numpy as np

from .models import HerbContribution, NetVector


def aggregate(contributions: Iterable[HerbContribution]) -> NetVector:
    weighted = [h for h in contributions if h.resolved and abs(h.dosage_ratio) > 0]
    if not weighted:
        return NetVector()

    vectors = np.array([[h.vector.x, h.vector.y] for h in weighted], dtype=float)
    weights = np.array([abs(h.dosage_ratio) for h in weighted], dtype=float)
    x, y = np.average(vectors, axis=0, weights=weights)

    magnitude = min(1.0, float(math.hypot(x, y)))
    if x == 0 and y == 0:
        angle = 0.0
    else:
        angle = math.degrees(math.atan2(y, x)) % 360.0
        # -0.0 % 360 以及极小负角度取模后可能等于 360
        if angle >= 360.0:
            angle = 0.0

    return NetVector(x=float(x), y=float(y), magnitude=magnitude, angle=angle)
