"""VerificationRequest 值对象测试"""

import json

from domain.verification.value_objects.verification_method import VerificationMethod
from domain.verification.value_objects.verification_request import (
    VerificationRequest,
    canonical_json,
)


class TestVerificationRequestMissingFields:
    """必填字段校验测试"""

    def test_complete_request_has_no_missing_fields(self):
        request = VerificationRequest(country_code="gb", redirect_url="https://cb.test/done")
        assert request.missing_fields() == []

    def test_missing_country_and_redirect(self):
        """测试缺少国家与回调地址"""
        request = VerificationRequest(country_code="", redirect_url="")
        assert request.missing_fields() == ["country", "redirect_url"]

    def test_stealth_requires_email(self):
        """测试 stealth 模式要求邮箱"""
        request = VerificationRequest(
            country_code="gb", redirect_url="https://cb.test/done", stealth=True
        )
        assert request.missing_fields() == ["email"]

    def test_stealth_with_email_is_complete(self):
        request = VerificationRequest(
            country_code="gb",
            redirect_url="https://cb.test/done",
            email="user@example.com",
            stealth=True,
        )
        assert request.missing_fields() == []


class TestVerificationRequestPayload:
    """请求载荷测试"""

    def test_minimal_payload_contains_only_required_fields(self):
        """测试只包含必填字段"""
        request = VerificationRequest(country_code="gb", redirect_url="https://cb.test/done")
        assert request.to_payload() == {
            "country": "gb",
            "redirect_url": "https://cb.test/done",
        }

    def test_empty_optional_fields_are_omitted(self):
        """测试空的可选字段被省略而不是发送空字符串"""
        request = VerificationRequest(
            country_code="gb",
            redirect_url="https://cb.test/done",
            business_settings_id="",
            external_user_id="",
            webhook="",
            email="",
        )
        payload = request.to_payload()
        assert "business_settings_id" not in payload
        assert "external_user_id" not in payload
        assert "webhook" not in payload
        assert "email" not in payload
        assert "stealth" not in payload

    def test_full_payload_uses_wire_names(self):
        """测试全部字段使用线上字段名"""
        request = VerificationRequest(
            country_code="de",
            redirect_url="https://cb.test/done",
            business_settings_id="bs-1",
            external_user_id="user-42",
            method=VerificationMethod.ID_SCAN,
            webhook="https://hooks.test/vma",
            email="user@example.com",
            stealth=True,
        )
        assert request.to_payload() == {
            "country": "de",
            "redirect_url": "https://cb.test/done",
            "method": "idScan",
            "business_settings_id": "bs-1",
            "external_user_id": "user-42",
            "webhook": "https://hooks.test/vma",
            "email": "user@example.com",
            "stealth": True,
        }


class TestCanonicalJson:
    """规范 JSON 编码测试"""

    def test_keys_sorted_and_compact(self):
        """测试键按字典序排列且无多余空白"""
        body = canonical_json({"redirect_url": "https://cb.test/done", "country": "gb"})
        assert body == b'{"country":"gb","redirect_url":"https://cb.test/done"}'

    def test_method_sent_in_camel_case(self):
        """测试 method 字段按服务商取值签名与发送"""
        request = VerificationRequest(
            country_code="gb",
            redirect_url="https://cb.test/done",
            method=VerificationMethod.parse("AGE_ESTIMATION"),
        )
        assert request.to_body() == (
            b'{"country":"gb","method":"ageEstimation","redirect_url":"https://cb.test/done"}'
        )

    def test_body_is_deterministic(self):
        """测试相同请求产生相同字节"""
        a = VerificationRequest(
            country_code="gb",
            redirect_url="https://cb.test/done",
            external_user_id="u1",
            business_settings_id="b1",
        )
        b = VerificationRequest(
            business_settings_id="b1",
            external_user_id="u1",
            redirect_url="https://cb.test/done",
            country_code="gb",
        )
        assert a.to_body() == b.to_body()

    def test_non_ascii_kept_as_utf8(self):
        """测试非 ASCII 字符以 UTF-8 保留"""
        body = canonical_json({"external_user_id": "größe"})
        assert body == '{"external_user_id":"größe"}'.encode("utf-8")
        assert json.loads(body) == {"external_user_id": "größe"}

    def test_slashes_not_escaped(self):
        body = VerificationRequest(country_code="gb", redirect_url="https://cb.test/a/b").to_body()
        assert b"https://cb.test/a/b" in body
