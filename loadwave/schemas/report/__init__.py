from loadwave.schemas.report.report_models import (
    NOT_APPLICABLE,
    FailureHint,
    LoadTestReport,
    OverviewMetrics,
    ResponseTimeMetrics,
    StepResponseTime,
)

__all__ = [
    'NOT_APPLICABLE',
    'FailureHint',
    'LoadTestReport',
    'OverviewMetrics',
    'ResponseTimeMetrics',
    'StepResponseTime',
]
