"""Markdown write-ups for completed sweeps."""

from .render import build_report_payload, render_report, write_report

__all__ = ["build_report_payload", "render_report", "write_report"]
