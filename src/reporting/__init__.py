"""
Reporting modules for the lake sonde data fetch
Author: Divya Nayan (divyanayan88@gmail.com)
Copyright: © 2024 Divya Nayan. All rights reserved.
"""

from .reporter import report_results

__all__ = ['report_results']
