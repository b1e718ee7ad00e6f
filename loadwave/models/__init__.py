from loadwave.models.step import Step, default_assertion_function
from loadwave.models.test_run import StepResult, TestRun, TestRunState

__all__ = [
    'Step',
    'StepResult',
    'TestRun',
    'TestRunState',
    'default_assertion_function',
]
