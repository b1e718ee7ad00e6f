from pydantic import BaseModel
from typing import List, Optional

from loadwave.schemas.load_test.step_request import StepRequest

class LoadTestRequest(BaseModel):
    steps: List[StepRequest]
    num_of_threads: Optional[int] = None
    num_of_repetitions: Optional[int] = None
    max_time_before_starting_in_ms: Optional[int] = None

    def config_params(self) -> dict:
        """지정된 실행 파라미터만 반환 (나머지는 기본값 사용)"""
        return self.model_dump(
            include={"num_of_threads", "num_of_repetitions", "max_time_before_starting_in_ms"},
            exclude_none=True,
        )
