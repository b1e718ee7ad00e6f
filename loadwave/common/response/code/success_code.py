from loadwave.common.response.code.base_code import BaseCode

class SuccessCode(BaseCode):
    LOAD_TEST_COMPLETED = ("부하테스트가 완료되었습니다.", 200)
