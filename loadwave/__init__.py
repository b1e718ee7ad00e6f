from loadwave.schemas.load_test.load_test_config import LoadTestConfig
from loadwave.services.report.report_renderer import render_report
from loadwave.services.testing.load_test_service import execute_test_runs, run_load_test
from loadwave.services.testing.step_registry import StepRegistry, add_step, step_registry

__all__ = [
    'LoadTestConfig',
    'StepRegistry',
    'add_step',
    'execute_test_runs',
    'render_report',
    'run_load_test',
    'step_registry',
]
