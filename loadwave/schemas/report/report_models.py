from datetime import datetime
from typing import Dict, List, Optional, Union
from pydantic import BaseModel

# 분모가 비어있는 평균값 표기
NOT_APPLICABLE = "N/A"

AverageValue = Union[float, str]


class OverviewMetrics(BaseModel):
    """전체 실행 개요"""
    performed_tests: int
    successes: int
    failures: int
    error_rate: float  # %


class StepResponseTime(BaseModel):
    """스텝별 응답시간"""
    step_name: str
    avg_value: AverageValue = NOT_APPLICABLE
    min_value: Optional[float] = None
    max_value: Optional[float] = None
    count: int = 0


class ResponseTimeMetrics(BaseModel):
    """응답시간 평균 (ms)"""
    all: AverageValue = NOT_APPLICABLE
    successes: AverageValue = NOT_APPLICABLE
    failures: AverageValue = NOT_APPLICABLE
    steps: List[StepResponseTime] = []


class FailureHint(BaseModel):
    """첫 번째 실패를 직접 재현하기 위한 정보"""
    test_run_id: str
    step_name: str
    curl: str
    error: Optional[str] = None


class LoadTestReport(BaseModel):
    """부하테스트 결과 리포트"""
    overview: OverviewMetrics
    response_time: ResponseTimeMetrics
    step_failure_distribution: Dict[str, int] = {}
    status_code_distribution: Dict[str, int] = {}
    failure_hint: Optional[FailureHint] = None

    # 실행 정보
    num_of_threads: Optional[int] = None
    num_of_repetitions: Optional[int] = None
    max_time_before_starting_in_ms: Optional[int] = None
    started_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None
    test_duration: Optional[float] = None  # 초
