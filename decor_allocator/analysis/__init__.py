"""Analysis functionality"""

from .analyzer import RequestAnalyzer, MetricsCalculator

__all__ = ['RequestAnalyzer', 'MetricsCalculator']
