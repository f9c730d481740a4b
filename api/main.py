#!/usr/bin/env python3
"""
处方寒热能量分析服务 - FastAPI 入口

运行: uvicorn api.main:app --host 0.0.0.0 --port 8000
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.settings import API_CONFIG
from api.middleware.exception_handler import setup_exception_handlers
from api.routes.energetics_routes import router as energetics_router
from api.utils.api_response import APIResponse
from core.energetics import get_energetics_engine

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """创建应用实例"""
    logging.basicConfig(
        level=getattr(logging, str(API_CONFIG["log_level"]).upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    app = FastAPI(
        title="TCM Qi Energetics",
        description="中药处方寒热指数、三焦分布、气机矢量与配伍分析",
        version="0.1.0"
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=API_CONFIG["cors_origins"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)
    app.include_router(energetics_router)

    @app.get("/health")
    async def health_check():
        """健康检查"""
        engine = get_energetics_engine()
        return APIResponse.success(data={
            "status": "ok",
            "herb_count": len(engine.catalog),
            "rule_count": len(engine.catalog.interaction_rules)
        })

    logger.info("✅ 处方寒热分析路由已加载")
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=API_CONFIG["host"], port=API_CONFIG["port"])
