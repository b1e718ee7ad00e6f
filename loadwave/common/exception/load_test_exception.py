from loadwave.common.response.code.base_code import BaseCode

class LoadTestException(Exception):
    """설정/호출 오류. 스텝 실패는 예외가 아니라 결과 데이터로 기록된다."""

    def __init__(self, code: BaseCode, message: str = None):
        self.code = code
        self.message = message or code.message()
        super().__init__(self.message)
