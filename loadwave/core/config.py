import os
from typing import Optional
from dotenv import load_dotenv

load_dotenv()


def _get_int_env(key: str, default: int) -> int:
    """정수 환경변수 조회 (비어있거나 숫자가 아니면 기본값)"""
    try:
        return int(os.getenv(key, "")) or default
    except ValueError:
        return default


def _get_optional_float_env(key: str) -> Optional[float]:
    value = os.getenv(key)
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        return None


class Settings:
    """애플리케이션 설정"""

    # 부하테스트 실행 설정
    NUM_OF_THREADS: int = _get_int_env("NUM_OF_THREADS", 1)
    NUM_OF_REPETITIONS: int = _get_int_env("NUM_OF_REPETITIONS", 1)
    MAX_TIME_BEFORE_STARTING_IN_MS: int = _get_int_env("MAX_TIME_BEFORE_STARTING_IN_MS", 0)

    # 사용자 정의 테스트 모듈 (add_step 호출이 들어있는 모듈)
    LOAD_TEST_MODULE: str = os.getenv("LOAD_TEST_MODULE", "load_test")

    # HTTP 설정 (None이면 타임아웃 없음)
    HTTP_TIMEOUT_SECONDS: Optional[float] = _get_optional_float_env("HTTP_TIMEOUT_SECONDS")

    # 리포트 설정
    REPORT_TIMEZONE: str = os.getenv("REPORT_TIMEZONE", "Asia/Seoul")

    # 로깅 설정
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @classmethod
    def get_load_test_config(cls) -> dict:
        """부하테스트 실행 설정을 딕셔너리로 반환"""
        return {
            "num_of_threads": cls.NUM_OF_THREADS,
            "num_of_repetitions": cls.NUM_OF_REPETITIONS,
            "max_time_before_starting_in_ms": cls.MAX_TIME_BEFORE_STARTING_IN_MS,
        }

    @classmethod
    def get_http_config(cls) -> dict:
        """HTTP 전송 설정을 딕셔너리로 반환"""
        return {
            "timeout_seconds": cls.HTTP_TIMEOUT_SECONDS,
        }


settings = Settings()
