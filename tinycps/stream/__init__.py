"""
Stream combinators
==================

- scan - накопление состояния по эмиссиям слота
"""

from .scan import ScanPolicy, scan

__all__ = ("ScanPolicy", "scan")
