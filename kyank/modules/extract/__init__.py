"""
Extract Module - Black Box Interface

Purpose: Run one yank: target dispatch, resolution, formatting
Interface: Extractor.extract()
Hidden: Pod vs. deployment dispatch, strict-mode bookkeeping

Orchestration only; cluster reads, resolution rules and line layout live
in their own modules.
"""

from .extract import Extractor

__all__ = ["Extractor"]
