"""
pytest配置文件 - 测试框架基础配置
"""
import pytest
import os
import sys

# 添加项目根目录到Python路径
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.energetics import default_catalog, build_entry


@pytest.fixture(scope="session")
def catalog():
    """内置药材目录快照"""
    return default_catalog()


@pytest.fixture
def plain_catalog(catalog):
    """附加一味无默认剂量、无归经的测试药材"""
    return catalog.with_entries([
        build_entry({"name": "测试温药", "nature": "温", "flavors": ["辛"], "direction": "升浮"}),
    ])


@pytest.fixture
def sample_prescriptions():
    """测试用处方"""
    return {
        "麻黄汤": [("麻黄", 9), ("桂枝", 6), ("杏仁", 9), ("炙甘草", 3)],
        "白虎汤": [("石膏", 50), ("知母", 18), ("甘草", 6)],
        "四逆汤": [("附子", 15), ("干姜", 9), ("炙甘草", 6)],
        "小柴胡汤": [("柴胡", 24), ("黄芩", 9)],
    }


def pytest_configure(config):
    """pytest启动配置"""
    # 添加自定义标记
    config.addinivalue_line("markers", "regression: 防回归测试标记")


def pytest_collection_modifyitems(config, items):
    """为防回归测试添加标记"""
    for item in items:
        if "regression" in item.nodeid:
            item.add_marker(pytest.mark.regression)
