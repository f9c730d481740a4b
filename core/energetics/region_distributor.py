#!/usr/bin/env python3
"""
三焦分布计算
单味药的贡献按三焦权重拆分后累加；权重优先取药典显式值，否则由归经推算
"""

import logging
from typing import Iterable, List

from .catalog import CatalogSnapshot
from .models import CatalogEntry, HerbContribution, RegionWeights, RegionTotal, RegionTotals

logger = logging.getLogger(__name__)

REGIONS = ("upper", "middle", "lower")


def region_of_channel(channel: str, catalog: CatalogSnapshot):
    """归经 → 三焦分区，按规则表顺序取首个命中"""
    for region, keywords in catalog.channel_regions:
        if any(keyword in channel for keyword in keywords):
            return region
    return None


def region_weights_for(entry: CatalogEntry, catalog: CatalogSnapshot) -> RegionWeights:
    """
    药材三焦权重

    归经涉及的分区平分权重；无可识别归经时全部归于中焦
    """
    if entry.region_weights is not None:
        return entry.region_weights

    hit: List[str] = []
    for channel in entry.channels:
        region = region_of_channel(channel, catalog)
        if region and region not in hit:
            hit.append(region)

    if not hit:
        return RegionWeights(upper=0.0, middle=1.0, lower=0.0)

    share = 1.0 / len(hit)
    return RegionWeights(**{region: (share if region in hit else 0.0) for region in REGIONS})


def distribute(contributions: Iterable[HerbContribution]) -> RegionTotals:
    """汇总三焦能量与占比（占比基于绝对值，全零时占比均为0）"""
    totals = {region: 0.0 for region in REGIONS}
    for herb in contributions:
        if not herb.index_contribution:
            continue
        for region in REGIONS:
            totals[region] += herb.index_contribution * getattr(herb.region_weights, region)

    denominator = sum(abs(v) for v in totals.values())
    if denominator == 0:
        return RegionTotals(**{region: RegionTotal(energy=totals[region], percentage=0.0) for region in REGIONS})

    return RegionTotals(**{
        region: RegionTotal(energy=totals[region], percentage=abs(totals[region]) / denominator * 100)
        for region in REGIONS
    })
