#!/usr/bin/env python3
"""
三焦气机动力学模拟（示意曲线，非药代动力学模型）

三个非负气池：
    中焦（谷气/运化）：初值与处方总剂量成正比，单调衰减
    上焦（卫气/宣散）：由中焦向上转运，随时间耗散
    下焦（营阴/收藏）：由中焦向下转运，随时间耗散

转运驱动（矢量模长接近0时几乎不发生转运，平和方剂的曲线保持静止）：
    中→上 ∝ 模长 × (升的分量 + 基础驱动) × (1 + 温热指数增益)
    中→下 ∝ 模长 × (降的分量 + 基础驱动) × (1 + 指数绝对值增益)
驱动经 cap·tanh(驱动/cap) 平滑饱和：速率不超过 max_transfer_rate，
且对方向保持严格单调，升浮方剂的上焦始终多于沉降方剂

显式欧拉法固定步长积分，每步后将各池截断到0以上。
同一组输入总是得到完全相同的序列。
"""

from typing import Any, Dict, List, Optional, Tuple

import numpy as np

from config.settings import KINETICS_CONFIG
from .models import KineticsFrame, NetVector

UPPER, MIDDLE, LOWER = 0, 1, 2


def saturate(drive: float, cap: float) -> float:
    """平滑饱和：小驱动近似线性，大驱动趋近 cap"""
    if cap <= 0:
        return 0.0
    return float(cap * np.tanh(drive / cap))


def transfer_rates(total_index: float, net_vector: NetVector,
                   params: Dict[str, Any], rate_mult: float = 1.0) -> Tuple[float, float]:
    """(中→上, 中→下) 每分钟转运速率"""
    gain = params["transfer_gain"] * net_vector.magnitude
    baseline = params["baseline_drive"]
    upward = gain * (max(0.0, net_vector.y) + baseline) * (1 + params["warming_gain"] * max(0.0, total_index))
    downward = gain * (max(0.0, -net_vector.y) + baseline) * (1 + params["index_gain"] * abs(total_index))
    cap = params["max_transfer_rate"]
    return saturate(upward, cap) * rate_mult, saturate(downward, cap) * rate_mult


def simulate(total_index: float,
             net_vector: NetVector,
             total_dosage: float,
             params: Optional[Dict[str, Any]] = None,
             middle_boost: float = 0.0,
             rate_mult: float = 1.0) -> List[KineticsFrame]:
    """
    运行模拟

    Args:
        total_index: 处方总寒热指数
        net_vector: 处方合力矢量
        total_dosage: 参考总剂量（克）
        params: 覆盖 KINETICS_CONFIG 的参数
        middle_boost: 中焦初值增量（服药方式修正）
        rate_mult: 转运速率倍数（服药方式修正）

    Returns:
        按时间排序的采样点（默认 0~120 分钟，每5分钟一个，共25个）
    """
    p = {**KINETICS_CONFIG, **(params or {})}
    dt = p["step_minutes"]
    steps = p["duration_minutes"] // dt

    k_up, k_down = transfer_rates(total_index, net_vector, p, rate_mult)
    k_mid = p["middle_decay"]
    decay = np.array([p["upper_decay"], 0.0, p["lower_decay"]])

    middle0 = p["initial_scale"] * max(0.0, total_dosage) / p["dosage_norm"] + middle_boost
    state = np.array([0.0, max(0.0, middle0), 0.0])

    frames = []
    for step in range(steps + 1):
        frames.append(KineticsFrame(
            time=step * dt,
            q_upper=round(float(state[UPPER]), 4),
            q_middle=round(float(state[MIDDLE]), 4),
            q_lower=round(float(state[LOWER]), 4),
        ))
        if step == steps:
            break

        middle = state[MIDDLE]
        # 单步流出量不超过中焦现存量
        total_rate = k_up + k_down + k_mid
        outflow = min(middle, total_rate * middle * dt)
        if total_rate > 0:
            to_upper = outflow * k_up / total_rate
            to_lower = outflow * k_down / total_rate
        else:
            to_upper = to_lower = 0.0

        inflow = np.array([to_upper, -outflow, to_lower])
        state = state - decay * state * dt + inflow
        state = np.maximum(state, 0.0)

    return frames
