"""Axiom 로깅 미들웨어 헬퍼 테스트.

Axiom logging middleware helper tests — masking and error extraction.
"""

import json

from campus_api.middleware.axiom_logging import extract_error_detail, mask_sensitive


class TestMaskSensitive:
    """민감 필드 마스킹 테스트."""

    def test_masks_applicant_contact_fields(self):
        body = {"firstName": "Ada", "email": "ada@example.com", "phone": "+1-555"}
        assert mask_sensitive(body) == {"firstName": "Ada", "email": "***", "phone": "***"}

    def test_masks_nested_credentials(self):
        body = {"items": [{"api_key": "k", "name": "x"}]}
        assert mask_sensitive(body) == {"items": [{"api_key": "***", "name": "x"}]}

    def test_limits_depth(self):
        deep: dict = {"a": {"b": {"c": {"d": {"e": {"f": {"g": 1}}}}}}}
        assert mask_sensitive(deep)["a"]["b"]["c"]["d"]["e"]["f"] == "..."


class TestExtractErrorDetail:
    """에러 응답 사유 추출 테스트."""

    def test_string_detail(self):
        assert extract_error_detail(b'{"detail": "Building not found"}') == "Building not found"

    def test_list_detail_is_serialized(self):
        body = json.dumps({"detail": [{"loc": ["body", "name"], "msg": "missing"}]}).encode()
        assert "missing" in extract_error_detail(body)

    def test_non_json_body(self):
        assert extract_error_detail(b"plain failure") == "plain failure"

    def test_truncates_long_detail(self):
        body = json.dumps({"detail": "x" * 2000}).encode()
        assert len(extract_error_detail(body)) == 503
