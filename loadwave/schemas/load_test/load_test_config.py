from typing import Any, Dict, Union

from pydantic import BaseModel, Field, ValidationError

from loadwave.common.exception import LoadTestException
from loadwave.common.response.code import FailureCode


class LoadTestConfig(BaseModel):
    """부하테스트 실행 설정"""
    num_of_threads: int = Field(default=64, ge=1)                    # 웨이브당 가상 사용자 수
    num_of_repetitions: int = Field(default=1, ge=1)                 # 웨이브 수
    max_time_before_starting_in_ms: int = Field(default=8000, ge=0)  # 시작 지연(jitter) 최댓값


def ensure_load_test_config(config: Union[LoadTestConfig, Dict[str, Any], None]) -> LoadTestConfig:
    """
    설정값을 검증하여 LoadTestConfig로 변환

    Args:
        config: LoadTestConfig 또는 파라미터 딕셔너리 (None이면 기본값)

    Returns:
        LoadTestConfig: 검증된 설정

    Raises:
        LoadTestException: 설정값이 올바르지 않을 때 (INVALID_LOAD_TEST_CONFIG)
    """
    if config is None:
        return LoadTestConfig()

    params = config.model_dump() if isinstance(config, LoadTestConfig) else dict(config)

    try:
        return LoadTestConfig.model_validate(params)
    except ValidationError as e:
        invalid_fields = ", ".join(
            f'"{".".join(str(loc) for loc in error["loc"])}" {error["msg"]}' for error in e.errors()
        )
        raise LoadTestException(
            FailureCode.INVALID_LOAD_TEST_CONFIG,
            f"Invalid load test parameters: {invalid_fields}",
        ) from e
