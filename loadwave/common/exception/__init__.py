from loadwave.common.exception.load_test_exception import LoadTestException

__all__ = ['LoadTestException']
