from loadwave.common.response.code.base_code import BaseCode
from loadwave.common.response.code.success_code import SuccessCode
from loadwave.common.response.code.failure_code import FailureCode

__all__ = [
    'FailureCode',
    'SuccessCode',
    'BaseCode',
]
