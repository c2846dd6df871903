"""테넌트 도메인 검증 테스트."""

import pytest

from hr_rules.schemas.enums import TenantDomainErrorCode
from hr_rules.services.tenant_domain_service import tenant_domain_service as svc


class TestTenantDomain:

    @pytest.mark.parametrize("domain", ["abc", "acme", "acme-corp", "a1b2c3", "x" * 30, "tamabee"])
    def test_valid_domains(self, domain):
        result = svc.validate_tenant_domain(domain)
        assert result.valid is True
        assert result.error_code is None

    @pytest.mark.parametrize("domain, code", [
        ("", TenantDomainErrorCode.TOO_SHORT),
        ("ab", TenantDomainErrorCode.TOO_SHORT),
        ("x" * 31, TenantDomainErrorCode.TOO_LONG),
        ("Acme", TenantDomainErrorCode.INVALID_CHARS),
        ("acme_corp", TenantDomainErrorCode.INVALID_CHARS),
        ("acme.io", TenantDomainErrorCode.INVALID_CHARS),
        ("-acme", TenantDomainErrorCode.INVALID_HYPHEN),
        ("acme-", TenantDomainErrorCode.INVALID_HYPHEN),
    ])
    def test_invalid_domains(self, domain, code):
        result = svc.validate_tenant_domain(domain)
        assert result.valid is False
        assert result.error_code == code

    def test_length_checked_before_chars(self):
        """길이 검사가 문자 검사보다 먼저."""
        assert svc.validate_tenant_domain("A_").error_code == TenantDomainErrorCode.TOO_SHORT
