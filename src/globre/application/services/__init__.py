"""Application services."""

from globre.application.services.matcher import build_match_report

__all__ = ["build_match_report"]
