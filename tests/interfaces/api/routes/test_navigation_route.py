"""导航分类 API 路由测试"""

import pytest

from fastapi import FastAPI
from fastapi.testclient import TestClient

from application.handlers.verification.classify_navigation_handler import (
    ClassifyNavigationHandler,
)
from domain.verification.services.redirect_classifier import RedirectClassifier
from interfaces.api.routes.navigation import router, set_classify_handler_getter


@pytest.fixture
def client():
    app = FastAPI()
    app.include_router(router)
    return TestClient(app)


@pytest.fixture
def setup_handler():
    """使用真实分类器，分类逻辑无 I/O"""
    handler = ClassifyNavigationHandler(RedirectClassifier("https://cb.test/done"))
    set_classify_handler_getter(lambda: handler)
    yield
    set_classify_handler_getter(None)


class TestClassifyNavigationRoute:
    """POST /navigation/classify 测试"""

    def test_redirect(self, client, setup_handler):
        response = client.post(
            "/navigation/classify",
            json={"url": "https://cb.test/done?verification_id=v1"},
        )

        assert response.status_code == 200
        assert response.json() == {
            "url": "https://cb.test/done?verification_id=v1",
            "is_redirect": True,
            "should_continue_navigation": False,
            "open_externally": False,
            "verification_id": "v1",
        }

    def test_ordinary_page_continues(self, client, setup_handler):
        data = client.post(
            "/navigation/classify", json={"url": "https://v.test/flow/1"}
        ).json()

        assert data["is_redirect"] is False
        assert data["should_continue_navigation"] is True

    def test_external_scheme(self, client, setup_handler):
        data = client.post(
            "/navigation/classify", json={"url": "mailto:help@example.com"}
        ).json()

        assert data["open_externally"] is True
        assert data["should_continue_navigation"] is False

    def test_handler_not_configured(self, client):
        set_classify_handler_getter(None)

        response = client.post("/navigation/classify", json={"url": "https://x.test"})

        assert response.status_code == 500
