"""
中药处方寒热能量分析系统 - 统一配置管理
"""
import os
from pathlib import Path
from dotenv import load_dotenv

# 项目根目录
PROJECT_ROOT = Path(os.getenv("ENERGETICS_PROJECT_ROOT", Path(__file__).resolve().parents[1]))

# 加载环境变量
env_file = PROJECT_ROOT / "config" / ".env"
if env_file.exists():
    load_dotenv(env_file)

# 基础路径配置
PATHS = {
    "project_root": PROJECT_ROOT,
    "data_dir": PROJECT_ROOT / "data",
    "herb_catalog": Path(os.getenv("HERB_CATALOG_PATH", PROJECT_ROOT / "data" / "herb_catalog.json")),
}

# API配置
API_CONFIG = {
    "host": os.getenv("HOST", "0.0.0.0"),
    "port": int(os.getenv("PORT", 8000)),
    "log_level": os.getenv("LOG_LEVEL", "INFO"),
    "cors_origins": [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()],
}

# 寒热指数计算配置
ENERGETICS_CONFIG = {
    # 药材缺少默认剂量时使用的参考剂量（克）
    "fallback_reference_dosage": float(os.getenv("FALLBACK_REFERENCE_DOSAGE", 9.0)),
    # 贡献度排行取前N味
    "top_n": int(os.getenv("ENERGETICS_TOP_N", 3)),
    # 寒热值刻度上下限 [-4, +4]
    "thermal_scale_bound": int(os.getenv("THERMAL_SCALE_BOUND", 4)),
    # 模糊匹配的最短药名长度
    "partial_match_min_length": int(os.getenv("PARTIAL_MATCH_MIN_LENGTH", 2)),
}

# 寒热分级阈值：恰好落在边界上的值归入离零更远的一档
CLASSIFIER_BANDS = {
    "strong_threshold": float(os.getenv("CLASSIFIER_STRONG_THRESHOLD", 4.0)),
    "mild_threshold": float(os.getenv("CLASSIFIER_MILD_THRESHOLD", 1.0)),
}

# 三焦气机动力学模拟参数
KINETICS_CONFIG = {
    "step_minutes": int(os.getenv("KINETICS_STEP_MINUTES", 5)),
    "duration_minutes": int(os.getenv("KINETICS_DURATION_MINUTES", 120)),
    "initial_scale": float(os.getenv("KINETICS_INITIAL_SCALE", 100.0)),
    "dosage_norm": float(os.getenv("KINETICS_DOSAGE_NORM", 60.0)),
    "transfer_gain": float(os.getenv("KINETICS_TRANSFER_GAIN", 0.03)),
    "warming_gain": float(os.getenv("KINETICS_WARMING_GAIN", 0.25)),
    "index_gain": float(os.getenv("KINETICS_INDEX_GAIN", 0.1)),
    "baseline_drive": float(os.getenv("KINETICS_BASELINE_DRIVE", 0.15)),
    "max_transfer_rate": float(os.getenv("KINETICS_MAX_TRANSFER_RATE", 0.025)),
    "middle_decay": float(os.getenv("KINETICS_MIDDLE_DECAY", 0.015)),
    "upper_decay": float(os.getenv("KINETICS_UPPER_DECAY", 0.03)),
    "lower_decay": float(os.getenv("KINETICS_LOWER_DECAY", 0.03)),
}
