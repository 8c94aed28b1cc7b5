"""导航分类 Handler"""

from application.queries.verification.classify_navigation import ClassifyNavigationQuery
from domain.verification.services.redirect_classifier import RedirectClassifier
from domain.verification.value_objects.navigation_decision import NavigationDecision


class ClassifyNavigationHandler:
    """导航分类 Handler

    纯计算，不做 I/O，可在导航回调中同步调用。
    """

    def __init__(self, classifier: RedirectClassifier):
        self._classifier = classifier

    def handle(self, query: ClassifyNavigationQuery) -> NavigationDecision:
        return self._classifier.decide(query.url)
