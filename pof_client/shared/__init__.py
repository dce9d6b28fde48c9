"""Shared cross-cutting helpers: telemetry and UTC datetime utilities.

Used by domain, application, and infrastructure. No business logic.
"""
