#!/usr/bin/env python3
"""
全局异常处理中间件
统一处理所有API异常，确保响应格式一致
"""

from fastapi import FastAPI, Request, HTTPException
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import traceback

from api.utils.api_response import APIResponse
from core.energetics.catalog import CatalogError

logger = logging.getLogger(__name__)

# 映射状态码到错误代码
ERROR_CODES = {
    400: "BAD_REQUEST",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
    422: "VALIDATION_ERROR",
    500: "INTERNAL_ERROR",
    503: "SERVICE_UNAVAILABLE"
}


def setup_exception_handlers(app: FastAPI):
    """设置全局异常处理器"""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """HTTP异常处理器 - 统一响应格式"""
        logger.warning(f"HTTP Exception: {exc.status_code} - {exc.detail}")
        return APIResponse.error(
            code=ERROR_CODES.get(exc.status_code, "UNKNOWN_ERROR"),
            message=str(exc.detail),
            details=f"HTTP {exc.status_code}",
            status_code=exc.status_code
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """请求参数校验失败"""
        logger.warning(f"Validation Error: {exc.errors()}")
        return APIResponse.error(
            code="VALIDATION_ERROR",
            message="请求参数格式不正确",
            details="; ".join(f"{'.'.join(str(p) for p in e['loc'])}: {e['msg']}" for e in exc.errors()),
            status_code=422
        )

    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError):
        """药材目录数据错误"""
        logger.error(f"Catalog Error: {exc}")
        return APIResponse.error(
            code="CATALOG_ERROR",
            message="药材目录数据无效",
            details=str(exc),
            status_code=503
        )

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError):
        """值错误处理器"""
        logger.error(f"Value Error: {exc}")
        return APIResponse.error(
            code="INVALID_VALUE",
            message="提供的数据格式不正确",
            details=str(exc),
            status_code=400
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """通用异常处理器 - 处理所有未捕获的异常"""
        logger.error(f"Unhandled Exception: {type(exc).__name__}: {exc}")
        logger.error(f"Traceback: {traceback.format_exc()}")

        # 生产环境不暴露详细错误信息
        error_details = str(exc) if logger.isEnabledFor(logging.DEBUG) else "内部服务器错误"
        return APIResponse.error(
            code="INTERNAL_ERROR",
            message="服务器内部错误，请稍后重试",
            details=error_details,
            status_code=500
        )


def bad_request(message: str, details: str = "") -> HTTPException:
    """400 Bad Request"""
    return HTTPException(status_code=400, detail=f"{message}: {details}" if details else message)
