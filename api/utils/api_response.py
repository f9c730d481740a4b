#!/usr/bin/env python3
"""
API响应格式统一辅助类
成功: {success, data, [message], [warnings], timestamp}
失败: {success, error: {code, message, [details]}, timestamp}
"""

from typing import Any, Dict, List, Optional
from datetime import datetime, timezone
from fastapi.responses import JSONResponse


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")


def _envelope(success: bool, status_code: int, **fields) -> JSONResponse:
    body: Dict[str, Any] = {"success": success}
    body.update({k: v for k, v in fields.items() if v not in (None, "", [])})
    if success and "data" not in body:
        body["data"] = fields.get("data")
    body["timestamp"] = utc_timestamp()
    return JSONResponse(status_code=status_code, content=body)


class APIResponse:
    """统一API响应格式辅助类"""

    @staticmethod
    def success(data: Any = None, message: str = "", status_code: int = 200,
                warnings: Optional[List[str]] = None) -> JSONResponse:
        """成功响应；warnings 用于未收录药材、剂量异常等非致命提示"""
        return _envelope(True, status_code, data=data, message=message, warnings=warnings)

    @staticmethod
    def analysis(analysis) -> JSONResponse:
        """处方分析结果，诊断信息同时以 warnings 列出"""
        data = analysis.to_dict()
        data["unresolved_herbs"] = analysis.unresolved_herbs
        warnings = [d.message for d in analysis.diagnostics]
        return APIResponse.success(data=data, warnings=warnings)

    @staticmethod
    def error(code: str, message: str, details: str = "", status_code: int = 400) -> JSONResponse:
        """错误响应"""
        error = {"code": code, "message": message}
        if details:
            error["details"] = details
        return _envelope(False, status_code, error=error)

    @staticmethod
    def not_found(resource: str = "资源") -> JSONResponse:
        """404 响应"""
        return APIResponse.error(code="NOT_FOUND", message=f"{resource}不存在", status_code=404)
