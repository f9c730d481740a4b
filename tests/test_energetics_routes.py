#!/usr/bin/env python3
"""
处方寒热分析API测试
"""

import pytest
from fastapi.testclient import TestClient

from api.main import app
from core.energetics import get_energetics_engine, default_catalog


class TestEnergeticsRoutes:
    """API路由测试类"""

    def setup_method(self):
        """测试前准备"""
        get_energetics_engine().refresh(default_catalog())
        self.client = TestClient(app)

    def test_health(self):
        response = self.client.get("/health")
        assert response.status_code == 200
        assert response.json()["data"]["rule_count"] == 17

    def test_analyze(self):
        """四逆汤分析"""
        response = self.client.post("/api/energetics/analyze", json={
            "herbs": [
                {"name": "附子", "dosage_grams": 15},
                {"name": "干姜", "dosage_grams": 9},
                {"name": "炙甘草", "dosage_grams": 6},
            ]
        })
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        data = body["data"]
        assert data["label"] == "strongly warming"
        assert len(data["kinetics"]) == 25
        assert len(data["herbs"]) == 3
        assert [m["label"] for m in data["interactions"]] == ["姜附配", "草附配"]
        assert data["unresolved_herbs"] == []
        assert "warnings" not in body

    def test_analyze_with_personalization(self):
        payload = {
            "herbs": [{"name": "麻黄", "dosage_grams": 9}, {"name": "桂枝", "dosage_grams": 6}],
        }
        plain = self.client.post("/api/energetics/analyze", json=payload).json()["data"]
        adjusted = self.client.post("/api/energetics/analyze", json={
            **payload, "constitution": "阳虚质", "administration_mode": "啜热粥助汗"
        }).json()["data"]
        assert adjusted["total_index"] == pytest.approx(plain["total_index"] * 1.2)
        assert adjusted["kinetics"][0]["q_middle"] == pytest.approx(plain["kinetics"][0]["q_middle"] + 25)

    def test_analyze_reports_unresolved(self):
        response = self.client.post("/api/energetics/analyze", json={
            "herbs": [{"name": "不存在的药", "dosage_grams": 10}, {"name": "甘草", "dosage_grams": 6}]
        })
        body = response.json()
        data = body["data"]
        assert data["unresolved_herbs"] == ["不存在的药"]
        assert data["diagnostics"][0]["code"] == "UNRESOLVED"
        assert len(body["warnings"]) == 1
        assert "不存在的药" in body["warnings"][0]

    def test_invalid_constitution(self):
        response = self.client.post("/api/energetics/analyze", json={
            "herbs": [{"name": "麻黄", "dosage_grams": 9}],
            "constitution": "不存在的体质"
        })
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "BAD_REQUEST"

    def test_empty_herbs_rejected(self):
        response = self.client.post("/api/energetics/analyze", json={"herbs": []})
        assert response.status_code == 422
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    def test_resolve_herb(self):
        response = self.client.get("/api/energetics/herbs/resolve", params={"name": "芍药"})
        data = response.json()["data"]
        assert data["resolved"] is True
        assert data["core_name"] == "白芍"
        assert data["match_kind"] == "alias"
        assert data["entry"]["temperature"] == "微寒"

    def test_resolve_processed_product(self):
        """炮制品返回原药名，分词器给出的炮制方法不再计入"""
        data = self.client.get("/api/energetics/herbs/resolve", params={"name": "炙草", "processing": "炙"}).json()["data"]
        assert data["core_name"] == "炙甘草"
        assert data["base_name"] == "甘草"
        assert data["processing"] is None

    def test_resolve_unknown_herb(self):
        data = self.client.get("/api/energetics/herbs/resolve", params={"name": "不存在的药"}).json()["data"]
        assert data["resolved"] is False
        assert data["entry"] is None

    def test_search(self):
        response = self.client.get("/api/energetics/herbs/search", params={"q": "黄芪"})
        assert response.status_code == 200
        assert response.json()["data"][0]["name"] == "黄芪"

    def test_search_not_found(self):
        response = self.client.get("/api/energetics/herbs/search", params={"q": "不存在的药"})
        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"

    def test_rules(self):
        data = self.client.get("/api/energetics/rules").json()["data"]
        assert len(data) == 17
        assert {"synergy", "antagonism", "modifier"} == {rule["type"] for rule in data}
