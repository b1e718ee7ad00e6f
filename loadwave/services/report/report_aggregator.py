import logging
from typing import List, Optional, Sequence

from loadwave.common.exception import LoadTestException
from loadwave.common.response.code import FailureCode
from loadwave.models.step import Step
from loadwave.models.test_run import TestRun
from loadwave.schemas.report.report_models import (
    NOT_APPLICABLE,
    AverageValue,
    FailureHint,
    LoadTestReport,
    OverviewMetrics,
    ResponseTimeMetrics,
    StepResponseTime,
)
from loadwave.utils.curl_generator import generate_curl_from_step
from loadwave.utils.metrics_calculator import MetricsCalculator

logger = logging.getLogger(__name__)


def _or_not_applicable(value: Optional[float]) -> AverageValue:
    return NOT_APPLICABLE if value is None else value


def status_code_key(status_code: Optional[int]) -> str:
    return f"statusCode{status_code}"


class ReportAggregator:
    """완료된 전체 테스트 실행 결과로 리포트를 생성"""

    def aggregate(
        self,
        test_runs: Sequence[TestRun],
        steps: Optional[Sequence[Step]] = None,
        **run_info
    ) -> LoadTestReport:
        """
        리포트 생성

        Args:
            test_runs: 모든 웨이브가 끝난 뒤의 전체 테스트 실행 결과
            steps: 등록된 스텝 목록 (스텝별 평균의 기준 순서/구성)
            run_info: 리포트에 함께 기록할 실행 정보 (설정값, 시작/종료 시각 등)

        Returns:
            LoadTestReport: 집계 결과

        Raises:
            LoadTestException: 집계할 테스트 실행 결과가 없을 때 (EMPTY_TEST_RUNS)
        """
        if not test_runs:
            raise LoadTestException(FailureCode.EMPTY_TEST_RUNS, "Cannot aggregate an empty set of test runs")

        succeeded_runs = [test_run for test_run in test_runs if test_run.succeeded]
        failed_runs = [test_run for test_run in test_runs if not test_run.succeeded]

        overview = OverviewMetrics(
            performed_tests=len(test_runs),
            successes=len(succeeded_runs),
            failures=len(failed_runs),
            error_rate=len(failed_runs) / len(test_runs) * 100,
        )

        response_time = ResponseTimeMetrics(
            all=_or_not_applicable(MetricsCalculator.calculate_runs_average(test_runs)),
            successes=_or_not_applicable(MetricsCalculator.calculate_runs_average(succeeded_runs)),
            failures=_or_not_applicable(MetricsCalculator.calculate_runs_average(failed_runs)),
            steps=self.compute_step_response_times(test_runs, steps),
        )

        report = LoadTestReport(
            overview=overview,
            response_time=response_time,
            step_failure_distribution=self.count_failed_steps(failed_runs),
            status_code_distribution=self.count_failure_status_codes(failed_runs),
            failure_hint=self.build_failure_hint(failed_runs),
            **run_info
        )

        logger.info(
            f"Report aggregated: {overview.performed_tests} tests, "
            f"{overview.failures} failures, error rate {overview.error_rate:.2f}%"
        )
        return report

    @staticmethod
    def compute_step_response_times(
        test_runs: Sequence[TestRun],
        steps: Optional[Sequence[Step]] = None
    ) -> List[StepResponseTime]:
        """
        스텝별 응답시간 통계

        기준 스텝 목록은 등록된 스텝 순서를 따른다. 스텝 목록이 없으면 첫 번째 실행의 스텝을 사용한다.
        어떤 실행도 도달하지 못한 스텝의 평균은 N/A로 표시된다.
        """
        if steps:
            step_names = [step.name for step in steps]
        else:
            step_names = [step_data.step.name for step_data in test_runs[0].steps_data]

        step_response_times = []
        for step_name in dict.fromkeys(step_names):
            stats = MetricsCalculator.calculate_basic_stats(
                MetricsCalculator.extract_step_response_times(test_runs, step_name)
            )
            step_response_times.append(StepResponseTime(
                step_name=step_name,
                avg_value=_or_not_applicable(stats.avg_value),
                min_value=stats.min_value,
                max_value=stats.max_value,
                count=stats.count,
            ))
        return step_response_times

    @staticmethod
    def count_failed_steps(failed_runs: Sequence[TestRun]):
        """실패한 실행의 마지막 스텝 이름별 개수"""
        return MetricsCalculator.count_by_key(
            test_run.last_step_data.step.name for test_run in failed_runs
        )

    @staticmethod
    def count_failure_status_codes(failed_runs: Sequence[TestRun]):
        """실패한 실행의 마지막 스텝 상태코드별 개수"""
        return MetricsCalculator.count_by_key(
            status_code_key(test_run.last_step_data.response_status_code) for test_run in failed_runs
        )

    @staticmethod
    def build_failure_hint(failed_runs: Sequence[TestRun]) -> Optional[FailureHint]:
        if not failed_runs:
            return None

        first_failed_run = failed_runs[0]
        step_data_with_error = first_failed_run.last_step_data
        return FailureHint(
            test_run_id=first_failed_run.id,
            step_name=step_data_with_error.step.name,
            curl=generate_curl_from_step(step_data_with_error.step),
            error=step_data_with_error.error,
        )
