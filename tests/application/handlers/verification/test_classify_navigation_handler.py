"""导航分类 Handler 测试"""

from application.handlers.verification.classify_navigation_handler import (
    ClassifyNavigationHandler,
)
from application.queries.verification.classify_navigation import ClassifyNavigationQuery
from domain.verification.services.redirect_classifier import RedirectClassifier


class TestClassifyNavigationHandler:
    """ClassifyNavigationHandler 测试"""

    def test_redirect(self):
        handler = ClassifyNavigationHandler(RedirectClassifier("https://cb.test/done"))

        decision = handler.handle(ClassifyNavigationQuery(url="https://cb.test/done?x=1"))

        assert decision.is_redirect is True
        assert decision.should_continue_navigation is False

    def test_external_scheme(self):
        handler = ClassifyNavigationHandler(RedirectClassifier("https://cb.test/done"))

        decision = handler.handle(ClassifyNavigationQuery(url="mailto:help@example.com"))

        assert decision.open_externally is True
