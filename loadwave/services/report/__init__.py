from loadwave.services.report.report_aggregator import ReportAggregator
from loadwave.services.report.report_renderer import render_report

__all__ = [
    'ReportAggregator',
    'render_report',
]
