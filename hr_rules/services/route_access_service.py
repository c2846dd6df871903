"""경로 접근 정책 서비스 — 역할/테넌트 기반 페이지 접근 제어.

Route Access Policy Service — Maps (path, role, tenant domain) to an
allow/deny decision. Used by the route guard middleware once per request.

Policy (evaluated in priority order, only one applies per path):
    1. /admin/*     → ADMIN_TAMABEE, MANAGER_TAMABEE 만 허용 (role check only)
    2. /support/*   → Tamabee 직원 역할만 허용 (role check only)
    3. /dashboard/* → 테넌트 도메인이 있어야 허용 (tenant check only; "tamabee" is a normal tenant)
    4. 그 외       → 항상 허용 (everything else is allowed)
"""

from hr_rules.config import settings
from hr_rules.schemas.access import AccessDenied, AccessGranted, RouteAccessDecision
from hr_rules.schemas.enums import (
    TAMABEE_ADMIN_ROLES,
    TAMABEE_ROLES,
    AccessDenialReason,
    UserRole,
)

ADMIN_ROUTE_PREFIX: str = "/admin"
SUPPORT_ROUTE_PREFIX: str = "/support"
DASHBOARD_ROUTE_PREFIX: str = "/dashboard"


def _to_role(role: UserRole | str | None) -> UserRole | None:
    """역할 문자열을 UserRole로 변환 — 알 수 없는 값은 None."""
    if role is None or isinstance(role, UserRole):
        return role
    try:
        return UserRole(role)
    except ValueError:
        return None


class RouteAccessService:
    """경로 접근 정책 서비스.

    Stateless route access policy. Every check is a single-shot decision.
    """

    def __init__(self, locales: list[str] | None = None) -> None:
        self._locales: frozenset[str] = frozenset(
            locales if locales is not None else settings.SUPPORTED_LOCALES
        )

    def remove_locale_prefix(self, path: str) -> str:
        """경로 앞의 /{locale} 세그먼트를 제거합니다.

        Strip a leading "/{locale}" segment when the locale is supported.
        "/vi/admin/x" → "/admin/x", "/admin/x" → "/admin/x", "/vi" → "/".
        """
        segments: list[str] = path.split("/", 2)
        # "/vi/admin" → ["", "vi", "admin"]
        if len(segments) >= 2 and segments[0] == "" and segments[1] in self._locales:
            return "/" + segments[2] if len(segments) == 3 else "/"
        return path

    def _matches(self, path: str, prefix: str) -> bool:
        stripped: str = self.remove_locale_prefix(path)
        return stripped == prefix or stripped.startswith(prefix + "/")

    def is_admin_route(self, path: str) -> bool:
        return self._matches(path, ADMIN_ROUTE_PREFIX)

    def is_dashboard_route(self, path: str) -> bool:
        return self._matches(path, DASHBOARD_ROUTE_PREFIX)

    def is_support_route(self, path: str) -> bool:
        return self._matches(path, SUPPORT_ROUTE_PREFIX)

    def check_admin_route_access(self, role: UserRole | str | None) -> RouteAccessDecision:
        if _to_role(role) in TAMABEE_ADMIN_ROLES:
            return AccessGranted()
        return AccessDenied(reason=AccessDenialReason.UNAUTHORIZED_ROLE)

    def check_dashboard_route_access(self, tenant_domain: str | None) -> RouteAccessDecision:
        """테넌트 도메인이 비어 있지 않으면 허용 — "tamabee"도 일반 테넌트로 취급."""
        if isinstance(tenant_domain, str) and tenant_domain:
            return AccessGranted()
        return AccessDenied(reason=AccessDenialReason.MISSING_TENANT_DOMAIN)

    def check_support_route_access(self, role: UserRole | str | None) -> RouteAccessDecision:
        if _to_role(role) in TAMABEE_ROLES:
            return AccessGranted()
        return AccessDenied(reason=AccessDenialReason.UNAUTHORIZED_ROLE)

    def check_route_access(
        self,
        path: str,
        role: UserRole | str | None,
        tenant_domain: str | None,
    ) -> RouteAccessDecision:
        """경로 종류에 따라 하나의 정책만 적용합니다.

        Classify the path and apply exactly one policy:
        admin → support → dashboard → default allow.

        Args:
            path: 요청 경로 (Request path, locale prefix allowed)
            role: 사용자 역할 (User role, enum member or raw claim string)
            tenant_domain: 테넌트 도메인 (Tenant domain claim)

        Returns:
            RouteAccessDecision: AccessGranted 또는 사유가 담긴 AccessDenied
        """
        if self.is_admin_route(path):
            return self.check_admin_route_access(role)
        if self.is_support_route(path):
            return self.check_support_route_access(role)
        if self.is_dashboard_route(path):
            return self.check_dashboard_route_access(tenant_domain)
        return AccessGranted()


route_access_service: RouteAccessService = RouteAccessService()
