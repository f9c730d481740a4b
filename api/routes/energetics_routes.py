"""
处方寒热能量分析相关API路由
"""
from fastapi import APIRouter, Query
from pydantic import BaseModel, Field
from typing import Optional, List
import logging

from api.middleware.exception_handler import bad_request
from api.utils.api_response import APIResponse
from core.energetics import (
    RawHerbInput,
    Constitution,
    AdministrationMode,
    apply_constitution,
    apply_administration,
    get_energetics_engine
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/energetics", tags=["处方寒热分析"])


class HerbInputModel(BaseModel):
    """单味药输入"""
    name: str
    dosage_grams: float
    processing_method: Optional[str] = None
    mapped_from: Optional[str] = None


class AnalyzeRequest(BaseModel):
    """处方寒热分析请求"""
    herbs: List[HerbInputModel] = Field(..., min_length=1)
    reference_total_dosage: Optional[float] = Field(None, gt=0)
    constitution: Optional[str] = None
    administration_mode: Optional[str] = None


def _entry_summary(entry) -> dict:
    return {
        "name": entry.name,
        "temperature": entry.temperature.value,
        "flavors": [f.value for f in entry.flavors],
        "channels": list(entry.channels),
        "direction": entry.direction.value,
        "default_dosage": entry.default_dosage,
        "efficacy": entry.efficacy,
        "usage": entry.usage
    }


@router.post("/analyze")
async def analyze_prescription(request: AnalyzeRequest):
    """计算处方寒热指数、三焦分布、气机矢量、配伍与动力学曲线"""
    constitution = None
    if request.constitution:
        try:
            constitution = Constitution(request.constitution)
        except ValueError:
            raise bad_request("体质类型无效", request.constitution)

    mode = None
    if request.administration_mode:
        try:
            mode = AdministrationMode(request.administration_mode)
        except ValueError:
            raise bad_request("服药方式无效", request.administration_mode)

    raw_herbs = [
        RawHerbInput(
            name=h.name,
            dosage_grams=h.dosage_grams,
            processing_method=h.processing_method,
            mapped_from=h.mapped_from
        )
        for h in request.herbs
    ]

    analysis = get_energetics_engine().calculate(raw_herbs, reference_total_dosage=request.reference_total_dosage)
    if constitution:
        analysis = apply_constitution(analysis, constitution)
    if mode:
        analysis = apply_administration(analysis, mode)

    if analysis.unresolved_herbs:
        logger.info(f"待补全药材: {'、'.join(analysis.unresolved_herbs)}")
    return APIResponse.analysis(analysis)


@router.get("/herbs/resolve")
async def resolve_herb(name: str = Query(..., min_length=1), processing: Optional[str] = None):
    """解析单个药名"""
    resolved = get_energetics_engine().resolve(name, processing)
    data = {
        "input": name,
        "resolved": resolved.is_resolved,
        "core_name": resolved.core_name,
        "base_name": resolved.base_name,
        "match_kind": resolved.match_kind.value,
        "processing": resolved.processing,
        "mapped_from": resolved.mapped_from,
        "candidates": list(resolved.candidates),
        "entry": _entry_summary(resolved.entry) if resolved.entry else None
    }
    return APIResponse.success(data=data)


@router.get("/herbs/search")
async def search_herbs(q: str = Query(..., min_length=1), limit: int = Query(8, ge=1, le=50)):
    """按药名、别名、功效、药性检索"""
    matches = get_energetics_engine().catalog.search(q, limit=limit)
    if not matches:
        return APIResponse.not_found(f"与 \"{q}\" 匹配的药材")
    return APIResponse.success(data=[_entry_summary(e) for e in matches])


@router.get("/rules")
async def list_interaction_rules():
    """配伍规则列表"""
    rules = get_energetics_engine().catalog.interaction_rules
    return APIResponse.success(data=[
        {
            "herbs": list(rule.herbs),
            "label": rule.label,
            "effect": rule.effect,
            "type": rule.interaction_type.value,
            "description": rule.description
        }
        for rule in rules
    ])
