from typing import Any, Optional

from fastapi.responses import JSONResponse
from fastapi.encoders import jsonable_encoder
from loadwave.common.response.code import BaseCode

class ResponseTemplate:
    """API 공통 응답 형식 {success, message, data, status_code}"""

    @staticmethod
    def _build(success: bool, code: BaseCode, message: Optional[str], data: Any) -> JSONResponse:
        status_code = code.status_code()
        response_body = {
            "success": success,
            "message": message or code.message(),
            "data": data,
            "status_code": status_code,
        }
        return JSONResponse(content=jsonable_encoder(response_body), status_code=status_code)

    @classmethod
    def success(cls, code: BaseCode, data: Any = None) -> JSONResponse:
        return cls._build(True, code, None, data)

    @classmethod
    def fail(cls, code: BaseCode, custom_message: str = None, data: Any = None) -> JSONResponse:
        return cls._build(False, code, custom_message, data)
