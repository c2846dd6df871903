"""서비스 패키지 — 검증/판정 규칙 계층.

Service package — Rule layer.
Contains stateless service classes for break validation, break record checks,
settings completeness, route access and tenant domains. Every service is
exposed as a module-level singleton and never performs I/O.
"""
