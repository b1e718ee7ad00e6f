from typing import Dict, List

from loadwave.schemas.report.report_models import AverageValue, LoadTestReport, NOT_APPLICABLE

INDENT = "    "


def format_number(value: AverageValue) -> str:
    """숫자는 소수점 둘째 자리까지, N/A는 그대로"""
    if isinstance(value, str):
        return value
    return f"{value:.2f}".rstrip("0").rstrip(".")


def format_ms(value: AverageValue) -> str:
    return format_number(value) if value == NOT_APPLICABLE else f"{format_number(value)} ms"


def _format_distribution(distribution: Dict[str, int]) -> List[str]:
    if not distribution:
        return [NOT_APPLICABLE]
    return [f"{key}: {count}" for key, count in distribution.items()]


def render_failure_hint(report: LoadTestReport) -> List[str]:
    hint = report.failure_hint
    if hint is None:
        return []
    return [
        "Try yourself:",
        INDENT + hint.curl,
        "",
        "Should return:",
        INDENT + (hint.error or NOT_APPLICABLE),
        "",
    ]


def render_report(report: LoadTestReport) -> str:
    """
    리포트를 콘솔 출력용 텍스트로 변환

    실패가 있으면 재현용 curl 명령어를 먼저 출력하고,
    이후 Overview / Response Time / 스텝별 실패 / 상태코드별 실패 순서로 출력한다.
    """
    overview = report.overview
    response_time = report.response_time

    lines = render_failure_hint(report)

    if report.test_duration is not None:
        lines += [f"Test Duration: {format_number(report.test_duration)} seconds", ""]

    lines += [
        "--- Overview ---",
        f"Performed Tests: {overview.performed_tests}",
        f"Successes: {overview.successes}",
        f"Failures: {overview.failures}",
        f"Error Rate: {format_number(overview.error_rate)}%",
        "",
        "--- Response Time ---",
        f"Average of All Tests: {format_ms(response_time.all)}",
        f"Average of Successes: {format_ms(response_time.successes)}",
        f"Average of Failures: {format_ms(response_time.failures)}",
        "",
        "-> Per Steps:",
    ]
    if response_time.steps:
        lines += [
            f"{INDENT}{step.step_name}: {format_ms(step.avg_value)}"
            for step in response_time.steps
        ]
    else:
        lines.append(INDENT + NOT_APPLICABLE)

    lines += ["", "--- How many failed on each Step ---"]
    lines += [INDENT + line for line in _format_distribution(report.step_failure_distribution)]

    lines += ["", "--- HTTP Status Code on Failures ---"]
    lines += [INDENT + line for line in _format_distribution(report.status_code_distribution)]

    return "\n".join(lines) + "\n"
