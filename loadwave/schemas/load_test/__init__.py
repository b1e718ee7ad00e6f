from loadwave.schemas.load_test.load_test_config import LoadTestConfig, ensure_load_test_config
from loadwave.schemas.load_test.load_test_request import LoadTestRequest
from loadwave.schemas.load_test.step_request import StepRequest

__all__ = [
    'LoadTestConfig',
    'LoadTestRequest',
    'StepRequest',
    'ensure_load_test_config',
]
