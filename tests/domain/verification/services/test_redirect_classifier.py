"""导航分类服务测试"""

import pytest

from domain.verification.services.redirect_classifier import (
    RedirectClassifier,
    classify,
    extract_verification_id,
)
from domain.verification.value_objects.navigation_decision import NavigationDecision


class TestClassify:
    """classify 纯函数测试"""

    def test_prefix_match_is_redirect(self):
        """测试命中回调前缀"""
        decision = classify("https://cb.example.com/x?y=1", "https://cb.example.com")

        assert decision.is_redirect is True
        assert decision.should_continue_navigation is False

    def test_other_host_is_not_redirect(self):
        """测试其他地址继续导航"""
        decision = classify("https://other.example.com", "https://cb.example.com")

        assert decision.is_redirect is False
        assert decision.should_continue_navigation is True

    @pytest.mark.parametrize(
        "url",
        ["https://cb.example.com/done", "", "mailto:a@b.c", "https://v.test/flow/1"],
    )
    def test_empty_prefix_always_continues(self, url):
        """测试未配置前缀时永远继续导航"""
        decision = classify(url, "")

        assert decision.is_redirect is False
        assert decision.should_continue_navigation is True

    def test_comparison_is_case_sensitive(self):
        """测试区分大小写"""
        decision = classify("https://CB.example.com/done", "https://cb.example.com")
        assert decision.is_redirect is False

    def test_no_trailing_slash_normalization(self):
        """测试不规范化末尾斜杠"""
        decision = classify("https://cb.example.com", "https://cb.example.com/")
        assert decision.is_redirect is False

    def test_no_percent_encoding_normalization(self):
        """测试不规范化百分号编码"""
        decision = classify("https://cb.example.com/a%2Fb", "https://cb.example.com/a/b")
        assert decision.is_redirect is False

    def test_classify_is_idempotent(self):
        """测试相同参数多次调用结果相同"""
        first = classify("https://cb.example.com/x?y=1", "https://cb.example.com")
        second = classify("https://cb.example.com/x?y=1", "https://cb.example.com")
        assert first == second

    def test_redirect_carries_verification_id(self):
        """测试从回调 URL 读取 verification_id"""
        decision = classify(
            "https://cb.test/done?verification_id=v1&state=xyz", "https://cb.test/done"
        )
        assert decision.verification_id == "v1"

    def test_non_redirect_has_no_verification_id(self):
        decision = classify("https://v.test/flow?verification_id=v1", "https://cb.test/done")
        assert decision.verification_id is None


class TestExtractVerificationId:
    """extract_verification_id 测试"""

    def test_present(self):
        assert extract_verification_id("https://cb.test/?verification_id=abc") == "abc"

    def test_absent(self):
        assert extract_verification_id("https://cb.test/?code=1") is None

    def test_empty_value(self):
        assert extract_verification_id("https://cb.test/?verification_id=") is None


class TestRedirectClassifier:
    """RedirectClassifier 测试"""

    @pytest.fixture
    def classifier(self) -> RedirectClassifier:
        return RedirectClassifier(callback_url_prefix="https://cb.test/done")

    def test_redirect_detected(self, classifier):
        decision = classifier.decide("https://cb.test/done?code=1")

        assert decision.is_redirect is True
        assert decision.should_continue_navigation is False
        assert decision.open_externally is False

    def test_regular_navigation_continues(self, classifier):
        decision = classifier.decide("https://v.test/flow/1")
        assert decision == NavigationDecision.proceed("https://v.test/flow/1")

    @pytest.mark.parametrize(
        "url",
        ["mailto:support@example.com", "gbanonymeage://verify?token=1", "intent://scan#Intent;end"],
    )
    def test_non_http_scheme_opens_externally(self, classifier, url):
        """测试非 HTTP scheme 交给外部应用并取消导航"""
        decision = classifier.decide(url)

        assert decision.open_externally is True
        assert decision.should_continue_navigation is False
        assert decision.is_redirect is False

    def test_custom_scheme_callback_is_redirect(self):
        """测试自定义 scheme 的回调地址优先识别为回调"""
        classifier = RedirectClassifier(callback_url_prefix="myapp://done")

        decision = classifier.decide("myapp://done?verification_id=v1")

        assert decision.is_redirect is True
        assert decision.open_externally is False
        assert decision.should_continue_navigation is False
        assert decision.verification_id == "v1"

    def test_custom_scheme_not_matching_prefix_opens_externally(self):
        classifier = RedirectClassifier(callback_url_prefix="myapp://done")

        decision = classifier.decide("myapp://other")

        assert decision.open_externally is True
        assert decision.is_redirect is False

    def test_about_blank_stays_in_browser(self, classifier):
        decision = classifier.decide("about:blank")
        assert decision.should_continue_navigation is True

    def test_custom_in_browser_schemes(self):
        """测试自定义允许的 scheme"""
        classifier = RedirectClassifier(
            callback_url_prefix="myapp://callback", in_browser_schemes=("https", "myapp")
        )

        decision = classifier.decide("myapp://callback?done=1")

        assert decision.is_redirect is True
        assert decision.open_externally is False

    def test_unconfigured_prefix_never_redirects(self):
        classifier = RedirectClassifier(callback_url_prefix="")
        assert classifier.decide("https://cb.test/done").should_continue_navigation is True
