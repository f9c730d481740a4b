#!/usr/bin/env python3
"""
三焦气机动力学模拟与寒热分级测试
"""

import pytest

from config.settings import KINETICS_CONFIG
from core.energetics import NetVector, RawHerbInput, calculate, simulate, classify, thermal_label
from core.energetics.kinetics_simulator import transfer_rates
from core.energetics.classifier import (
    STRONGLY_WARMING, MILDLY_WARMING, BALANCED, MILDLY_COOLING, STRONGLY_COOLING
)


WARM_LIFTING = NetVector(x=0.5, y=0.8, magnitude=0.943, angle=58.0)


class TestKineticsSimulator:
    """动力学模拟测试类"""

    def test_frame_count_and_times(self):
        """默认 0~120 分钟，每5分钟一帧，共25帧"""
        frames = simulate(3.0, WARM_LIFTING, 60.0)
        assert len(frames) == 25
        assert [f.time for f in frames] == list(range(0, 121, 5))

    def test_deterministic(self):
        """相同输入得到完全相同的序列"""
        assert simulate(3.0, WARM_LIFTING, 60.0) == simulate(3.0, WARM_LIFTING, 60.0)

    def test_initial_state(self):
        """初始：中焦与剂量成正比，上下焦为0"""
        first = simulate(3.0, WARM_LIFTING, 60.0)[0]
        assert first.q_middle == pytest.approx(100.0)
        assert first.q_upper == 0
        assert first.q_lower == 0

    def test_middle_never_increases(self):
        frames = simulate(3.0, WARM_LIFTING, 60.0)
        middles = [f.q_middle for f in frames]
        assert all(later <= earlier for earlier, later in zip(middles, middles[1:]))

    def test_upper_rises_then_falls(self):
        """温升方剂：上焦先升后降"""
        uppers = [f.q_upper for f in simulate(3.0, WARM_LIFTING, 60.0)]
        peak = max(uppers)
        peak_at = uppers.index(peak)
        assert peak > 0
        assert 0 < peak_at < len(uppers) - 1
        assert uppers[-1] < peak

    def test_all_pools_non_negative(self):
        for index in (-8.0, 0.0, 8.0):
            for frame in simulate(index, NetVector(x=-1, y=-1, magnitude=1.0, angle=225.0), 200.0):
                assert frame.q_upper >= 0 and frame.q_middle >= 0 and frame.q_lower >= 0

    def test_cooling_sinking_fills_lower(self):
        """寒降方剂：下焦多于上焦"""
        frames = simulate(-5.0, NetVector(x=0.0, y=-0.8, magnitude=0.8, angle=270.0), 60.0)
        assert max(f.q_lower for f in frames) > max(f.q_upper for f in frames)

    def test_zero_magnitude_is_inert(self):
        """矢量为零时无转运，上下焦保持为0"""
        frames = simulate(0.0, NetVector(), 60.0)
        assert all(f.q_upper == 0 and f.q_lower == 0 for f in frames)
        assert frames[-1].q_middle < frames[0].q_middle

    def test_zero_dosage_all_zero(self):
        frames = simulate(3.0, WARM_LIFTING, 0.0)
        assert all(f.q_upper == 0 and f.q_middle == 0 and f.q_lower == 0 for f in frames)

    def test_middle_boost_and_rate(self):
        """服药方式修正：中焦初值增量与速率倍数"""
        boosted = simulate(3.0, WARM_LIFTING, 60.0, middle_boost=25.0)
        assert boosted[0].q_middle == pytest.approx(125.0)

        slow = simulate(3.0, WARM_LIFTING, 60.0, rate_mult=0.5)
        normal = simulate(3.0, WARM_LIFTING, 60.0)
        assert slow[1].q_upper < normal[1].q_upper

    @pytest.mark.regression
    def test_direction_matters_at_high_index(self):
        """高指数下升浮与沉降仍应区分：升浮上焦为主，沉降下焦为主"""
        lifting = simulate(8.0, NetVector(x=0.0, y=0.9, magnitude=0.9, angle=90.0), 60.0)
        sinking = simulate(8.0, NetVector(x=0.0, y=-0.9, magnitude=0.9, angle=270.0), 60.0)

        lifting_upper = max(f.q_upper for f in lifting)
        lifting_lower = max(f.q_lower for f in lifting)
        sinking_upper = max(f.q_upper for f in sinking)
        sinking_lower = max(f.q_lower for f in sinking)

        assert lifting_upper > 2 * lifting_lower, "升浮方剂上焦应明显多于下焦"
        assert sinking_lower > 1.5 * sinking_upper, "沉降方剂下焦应明显多于上焦"
        assert sinking_upper < lifting_upper

    def test_rates_saturate_smoothly(self):
        """速率不超过上限，且随指数单调增加"""
        vector = NetVector(x=0.0, y=0.9, magnitude=0.9, angle=90.0)
        params = KINETICS_CONFIG
        rates = [transfer_rates(index, vector, params)[0] for index in (0.0, 2.0, 8.0, 20.0)]
        assert all(r <= params["max_transfer_rate"] for r in rates)
        assert rates == sorted(rates) and len(set(rates)) == len(rates)

    def test_custom_params(self):
        frames = simulate(0.0, NetVector(), 60.0, params={"duration_minutes": 60, "step_minutes": 10})
        assert [f.time for f in frames] == [0, 10, 20, 30, 40, 50, 60]


class TestKineticsCurveShape:
    """真实处方的动力学曲线形态"""

    @pytest.mark.regression
    @pytest.mark.parametrize("formula", ["四逆汤", "白虎汤"])
    def test_upper_and_lower_rise_then_fall(self, catalog, sample_prescriptions, formula):
        """上下焦均从0起，峰值落在窗口中段，120分钟时回落到峰值的一小部分"""
        herbs = [RawHerbInput(name, dosage) for name, dosage in sample_prescriptions[formula]]
        frames = calculate(herbs, catalog).kinetics

        for pool in ("q_upper", "q_lower"):
            values = [getattr(f, pool) for f in frames]
            peak = max(values)
            peak_at = frames[values.index(peak)].time
            assert values[0] == 0
            assert peak > 0, f"{formula} 的 {pool} 应有转运"
            assert 10 <= peak_at <= 60, f"{formula} 的 {pool} 峰值时间 {peak_at} 不应贴在窗口两端"
            assert values[-1] < 0.25 * peak, f"{formula} 的 {pool} 在120分钟时应已大部分耗散"


class TestClassifier:
    """寒热分级测试类"""

    @pytest.mark.parametrize("value,label", [
        (6.0, STRONGLY_WARMING),
        (4.0, STRONGLY_WARMING),
        (3.99, MILDLY_WARMING),
        (1.0, MILDLY_WARMING),
        (0.99, BALANCED),
        (0.0, BALANCED),
        (-0.99, BALANCED),
        (-1.0, MILDLY_COOLING),
        (-3.99, MILDLY_COOLING),
        (-4.0, STRONGLY_COOLING),
        (-10.0, STRONGLY_COOLING),
    ])
    def test_band_boundaries(self, value, label):
        """边界值归入离零更远的一档"""
        assert classify(value) == label

    def test_custom_bands(self):
        bands = {"strong_threshold": 2.0, "mild_threshold": 0.5}
        assert classify(2.0, bands) == STRONGLY_WARMING
        assert classify(0.5, bands) == MILDLY_WARMING
        assert classify(-0.4, bands) == BALANCED

    @pytest.mark.parametrize("value,label", [
        (5.0, "大热"),
        (3.0, "热"),
        (2.5, "温"),
        (1.0, "微温"),
        (0.5, "平偏温"),
        (0.49, "平"),
        (-0.49, "平"),
        (-0.5, "平偏凉"),
        (-1.5, "微寒"),
        (-2.0, "凉"),
        (-3.2, "寒"),
        (-4.0, "大寒"),
    ])
    def test_thermal_label(self, value, label):
        assert thermal_label(value) == label
