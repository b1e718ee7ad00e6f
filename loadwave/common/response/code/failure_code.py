from loadwave.common.response.code.base_code import BaseCode

class FailureCode(BaseCode):
    INTERNAL_SERVER_ERROR = ("서버 에러입니다.", 500)
    BAD_REQUEST = ("잘못된 요청입니다", 400)

    # 설정 오류 (테스트 시작 전에 즉시 실패)
    INVALID_STEP = ("스텝 정의가 올바르지 않습니다", 400)
    INVALID_LOAD_TEST_CONFIG = ("부하테스트 설정이 올바르지 않습니다", 400)
    NO_STEPS_REGISTERED = ("등록된 스텝이 없습니다", 400)

    # 집계 호출 오류
    EMPTY_TEST_RUNS = ("집계할 테스트 결과가 없습니다", 500)
