#!/usr/bin/env python3
"""
药名解析测试
覆盖精确匹配、别名、炮制前缀/后缀/括注、模糊匹配与未收录
"""

import pytest

from core.energetics import HerbResolver, MatchKind, RawHerbInput, default_catalog


class TestHerbResolver:
    """药名解析器测试类"""

    def setup_method(self):
        """测试前准备"""
        self.resolver = HerbResolver(default_catalog())

    def resolve(self, name, processing=None):
        return self.resolver.resolve(RawHerbInput(name=name, dosage_grams=9.0, processing_method=processing))

    def test_exact_match(self):
        """收录药名精确命中"""
        herb = self.resolve("麻黄")
        assert herb.is_resolved
        assert herb.core_name == "麻黄"
        assert herb.match_kind is MatchKind.EXACT
        assert herb.processing is None

    def test_alias_match(self):
        """别名映射到正名并记录来源"""
        herb = self.resolve("芍药")
        assert herb.core_name == "白芍"
        assert herb.match_kind is MatchKind.ALIAS
        assert herb.mapped_from == "芍药"

    @pytest.mark.regression
    def test_processed_product_listed_as_itself(self):
        """炮制品自身收录时不应被剥离为原药"""
        herb = self.resolve("炮姜")
        assert herb.core_name == "炮姜", "炮姜应直接命中，而不是剥离为 姜"
        assert herb.processing is None

        herb = self.resolve("炙甘草")
        assert herb.core_name == "炙甘草"
        assert herb.match_kind is MatchKind.EXACT

    def test_alias_checked_before_stripping(self):
        """以炮制字开头的别名（生地）应走别名，而不是剥离 生"""
        herb = self.resolve("生地")
        assert herb.core_name == "地黄"
        assert herb.match_kind is MatchKind.ALIAS
        assert herb.processing is None

    def test_prefix_processing_stripped(self):
        """炮制前缀剥离：姜半夏 → 半夏 + 姜"""
        herb = self.resolve("姜半夏")
        assert herb.core_name == "半夏"
        assert herb.processing == "姜"
        assert herb.match_kind is MatchKind.PROCESSED

    def test_longest_prefix_wins(self):
        """蜜炙 优先于 蜜"""
        herb = self.resolve("蜜炙黄芪")
        assert herb.core_name == "黄芪"
        assert herb.processing == "蜜炙"

    def test_bracket_processing(self):
        """括注炮制方法：白术(炒)、白术（麸炒）"""
        herb = self.resolve("白术(炒)")
        assert herb.core_name == "白术"
        assert herb.processing == "炒"

        herb = self.resolve("白术（麸炒）")
        assert herb.core_name == "白术"
        assert herb.processing == "麸炒"

    def test_suffix_processing(self):
        """炭类后缀：大黄炭 → 大黄 + 炭"""
        herb = self.resolve("大黄炭")
        assert herb.core_name == "大黄"
        assert herb.processing == "炭"

    def test_alias_after_stripping(self):
        """剥离炮制后再走别名：酒川连 → 黄连"""
        herb = self.resolve("酒川连")
        assert herb.core_name == "黄连"
        assert herb.processing == "酒"
        assert herb.match_kind is MatchKind.ALIAS
        assert herb.mapped_from == "川连"

    def test_explicit_processing_kept(self):
        """分词器给出的炮制方法优先"""
        herb = self.resolve("麻黄", processing="蜜炙")
        assert herb.core_name == "麻黄"
        assert herb.processing == "蜜炙"

    @pytest.mark.regression
    def test_explicit_processing_dropped_for_processed_product(self):
        """炮制品原名命中时，分词器给出的炮制方法不再计入"""
        herb = self.resolve("炙甘草", processing="炙")
        assert herb.core_name == "炙甘草"
        assert herb.processing is None
        assert herb.base_name == "甘草"

        herb = self.resolve("制附子", processing="制")
        assert herb.core_name == "黑顺片"
        assert herb.processing is None
        assert herb.base_name == "附子"

    def test_partial_unique_candidate(self):
        """唯一模糊候选：枸杞 → 枸杞子"""
        herb = self.resolve("枸杞")
        assert herb.core_name == "枸杞子"
        assert herb.match_kind is MatchKind.PARTIAL
        assert herb.mapped_from == "枸杞"

    def test_partial_ambiguous_is_unresolved(self):
        """多个候选时不猜测，按未收录处理并给出候选"""
        herb = self.resolve("熟地黄片")
        assert not herb.is_resolved
        assert herb.match_kind is MatchKind.UNRESOLVED
        assert set(herb.candidates) == {"熟地黄", "地黄"}

    def test_unknown_herb(self):
        """未收录药材不报错"""
        herb = self.resolve("不存在的药")
        assert not herb.is_resolved
        assert herb.entry is None
        assert herb.core_name == "不存在的药"
        assert herb.candidates == ()

    def test_unknown_herb_keeps_processing(self):
        """未收录药材仍保留炮制标记"""
        herb = self.resolve("炒不存在")
        assert not herb.is_resolved
        assert herb.processing == "炒"

    def test_single_character_never_partial(self):
        """单字不做模糊匹配"""
        herb = self.resolve("芍")
        assert not herb.is_resolved
        assert herb.candidates == ()

    @pytest.mark.parametrize("raw_name,expected", [
        ("白术(炒)", ("白术", "炒")),
        ("大黄炒炭", ("大黄", "炒炭")),
        ("醋柴胡", ("柴胡", "醋")),
        ("黄芩", ("黄芩", None)),
    ])
    def test_split_processing(self, raw_name, expected):
        """炮制标记拆分"""
        assert self.resolver.split_processing(raw_name) == expected

    def test_resolve_all_keeps_order(self):
        """批量解析保持输入顺序"""
        raws = [RawHerbInput(n, 6.0) for n in ("桂枝", "芍药", "不存在的药")]
        names = [h.core_name for h in self.resolver.resolve_all(raws)]
        assert names == ["桂枝", "白芍", "不存在的药"]
