#!/usr/bin/env python3
"""
药对配伍检测测试
"""

import pytest

from core.energetics import HerbResolver, RawHerbInput, InteractionType, default_catalog, catalog_from_dict
from core.energetics.pair_detector import detect_pairs


class TestPairDetector:
    """配伍检测测试类"""

    def setup_method(self):
        """测试前准备"""
        self.catalog = default_catalog()
        self.resolver = HerbResolver(self.catalog)

    def detect(self, names):
        resolved = self.resolver.resolve_all([RawHerbInput(n, 9.0) for n in names])
        return detect_pairs(resolved, self.catalog.interaction_rules)

    def test_single_pair(self):
        """柴胡 + 黄芩 只触发 柴芩配"""
        matches = self.detect(["柴胡", "黄芩"])
        assert [m.label for m in matches] == ["柴芩配"]
        assert matches[0].interaction_type is InteractionType.SYNERGY

    def test_order_independent(self):
        """输入顺序不影响结果"""
        forward = self.detect(["麻黄", "桂枝", "杏仁", "甘草"])
        backward = self.detect(["甘草", "杏仁", "桂枝", "麻黄"])
        assert forward == backward
        assert [m.label for m in forward] == ["麻桂配", "麻黄汤"]

    def test_herb_in_multiple_rules(self):
        """一味药可参与多条规则：桂枝同时与麻黄、白芍配伍"""
        labels = [m.label for m in self.detect(["麻黄", "桂枝", "芍药"])]
        assert labels == ["麻桂配", "桂芍配"]

    def test_antagonism_flagged(self):
        """十八反需要标记为 antagonism"""
        matches = self.detect(["甘草", "甘遂"])
        assert len(matches) == 1
        assert matches[0].interaction_type is InteractionType.ANTAGONISM

    def test_alias_resolves_to_core_name(self):
        """别名按正名参与配伍：川连 + 官桂 → 交泰配"""
        labels = [m.label for m in self.detect(["川连", "官桂"])]
        assert labels == ["交泰配"]

    def test_prefixed_processing_resolves_to_core_name(self):
        """带炮制前缀的药名剥离后参与配伍：酒黄连 + 肉桂 → 交泰配"""
        labels = [m.label for m in self.detect(["酒黄连", "肉桂"])]
        assert labels == ["交泰配"]

    @pytest.mark.regression
    def test_processed_product_matches_base_herb(self):
        """收录的炮制品以原药名参与配伍"""
        assert [m.label for m in self.detect(["附子", "炙甘草"])] == ["草附配"], "炙甘草应按甘草匹配"
        assert [m.label for m in self.detect(["制附子", "干姜"])] == ["姜附配"], "制附子(黑顺片)应按附子匹配"
        assert [m.label for m in self.detect(["黑顺片", "炮姜"])] == ["姜附配"]

    def test_classic_mahuang_decoction_with_honey_fried_licorice(self):
        """麻黄汤原方用炙甘草，仍应触发 麻黄汤 规则"""
        labels = [m.label for m in self.detect(["麻黄", "桂枝", "杏仁", "炙甘草"])]
        assert labels == ["麻桂配", "麻黄汤"]

    def test_base_name_recorded(self):
        resolved = self.resolver.resolve(RawHerbInput("炙草", 6.0))
        assert resolved.core_name == "炙甘草"
        assert resolved.base_name == "甘草"
        assert self.resolver.resolve(RawHerbInput("柴胡", 6.0)).base_name == "柴胡"

    def test_product_bases_from_catalog(self):
        """炮制品表可由外部目录覆盖"""
        catalog = catalog_from_dict({"product_bases": {"熟地黄": "地黄"}})
        resolved = HerbResolver(catalog).resolve(RawHerbInput("熟地", 12.0))
        assert resolved.base_name == "地黄"

    def test_unresolved_herbs_ignored(self):
        matches = self.detect(["柴胡", "不存在的药"])
        assert matches == []

    def test_no_rules(self):
        resolved = self.resolver.resolve_all([RawHerbInput("柴胡", 9.0), RawHerbInput("黄芩", 9.0)])
        assert detect_pairs(resolved, ()) == []
