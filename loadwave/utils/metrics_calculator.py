from typing import Dict, Iterable, List, Optional
from dataclasses import dataclass

from loadwave.models.test_run import TestRun


@dataclass
class MetricStats:
    """메트릭 통계 결과"""
    max_value: Optional[float]
    min_value: Optional[float]
    avg_value: Optional[float]
    count: int


class MetricsCalculator:
    """응답시간 통계 계산 유틸리티"""

    @staticmethod
    def calculate_basic_stats(values: List[float]) -> MetricStats:
        """
        기본 통계 계산 (max, min, avg, count)

        Args:
            values: 계산할 값들의 리스트

        Returns:
            MetricStats: 통계 결과 (값이 없으면 max/min/avg는 None)
        """
        if not values:
            return MetricStats(None, None, None, 0)

        count = len(values)
        return MetricStats(max(values), min(values), sum(values) / count, count)

    @staticmethod
    def calculate_average(values: List[float]) -> Optional[float]:
        """평균 계산 (값이 없으면 None)"""
        return MetricsCalculator.calculate_basic_stats(values).avg_value

    @staticmethod
    def calculate_runs_average(test_runs: Iterable[TestRun]) -> Optional[float]:
        """
        테스트 실행 집합의 평균 응답시간

        각 실행의 스텝 응답시간 평균을 구한 뒤, 그 값들의 평균을 반환한다.

        Args:
            test_runs: 테스트 실행 목록

        Returns:
            Optional[float]: 평균 응답시간 (ms), 집합이 비어있으면 None
        """
        run_averages = [
            average
            for average in (test_run.average_response_time() for test_run in test_runs)
            if average is not None
        ]
        return MetricsCalculator.calculate_average(run_averages)

    @staticmethod
    def extract_step_response_times(test_runs: Iterable[TestRun], step_name: str) -> List[float]:
        """
        특정 스텝의 응답시간들을 추출

        해당 스텝까지 도달하지 못하고 중단된 실행은 제외된다.
        """
        response_times = []
        for test_run in test_runs:
            step_data = next(
                (step_data for step_data in test_run.steps_data if step_data.step.name == step_name),
                None
            )
            if step_data is not None:
                response_times.append(step_data.response_time)
        return response_times

    @staticmethod
    def count_by_key(keys: Iterable[str]) -> Dict[str, int]:
        """키별 개수를 사전순으로 정렬하여 반환"""
        counts: Dict[str, int] = {}
        for key in keys:
            counts[key] = counts.get(key, 0) + 1
        return {key: counts[key] for key in sorted(counts)}
