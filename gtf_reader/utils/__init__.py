#!/usr/bin/env python3

"""
Utility helpers for the GTF reader.
"""

from .performance_monitor import LoadMonitor, LoadStats

__all__ = ['LoadMonitor', 'LoadStats']
