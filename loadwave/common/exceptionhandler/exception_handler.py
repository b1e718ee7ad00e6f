from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
import logging
import traceback

from loadwave.common.exception import LoadTestException
from loadwave.common.response.code import FailureCode
from loadwave.common.response.response_template import ResponseTemplate

logger = logging.getLogger(__name__)

def register_exception_handler(app: FastAPI):
    # 설정 오류(LoadTestException) 처리
    @app.exception_handler(LoadTestException)
    async def load_test_exception_handler(request: Request, exc: LoadTestException):
        log = logger.warning if exc.code.is_client_error() else logger.error
        log(f"LoadTestException occurred: {exc.code.name} - {exc.message}")
        return ResponseTemplate.fail(
            code=exc.code,
            custom_message=exc.message,
        )

    # 요청 바디 검증 실패
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Request validation failed: {exc.errors()}")
        return ResponseTemplate.fail(
            FailureCode.BAD_REQUEST,
            data=[{"loc": error["loc"], "msg": error["msg"]} for error in exc.errors()],
        )

    # 예상치 못한 모든 예외 처리
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        tb_str = ''.join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        logger.error(f"Unhandled exception occurred: {exc}\nStack trace:\n{tb_str}")
        return ResponseTemplate.fail(
            FailureCode.INTERNAL_SERVER_ERROR,
        )
