"""Pytest configuration and fixtures."""
import asyncio
from typing import Any, Callable, List, Optional, Union

import pytest

from loadwave.models.test_run import StepResult, TestRun, TestRunState
from loadwave.services.testing.step_registry import StepRegistry
from loadwave.services.transport.http_transport import TransportResponse


def make_response(status_code: Optional[int] = 200, body: Any = None, elapsed_ms: Optional[float] = 10.0,
                  error: Optional[str] = None) -> TransportResponse:
    return TransportResponse(
        status_code=status_code,
        body={"ok": True} if body is None and status_code is not None else body,
        elapsed_ms=elapsed_ms,
        error=error,
    )


class FakeTransport:
    """send 호출을 기록하고 responder 결과를 돌려주는 가짜 전송 객체"""

    def __init__(self, responder: Union[TransportResponse, Exception, Callable[..., Any]] = None):
        self.responder = responder if responder is not None else make_response()
        self.calls: List[tuple] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def send(self, method, url, headers=None, body=None):
        self.calls.append((method, url, dict(headers or {}), body))
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            # 다른 가상 사용자에게 실행을 양보
            await asyncio.sleep(0)
            result = self.responder(method, url) if callable(self.responder) else self.responder
        finally:
            self.in_flight -= 1

        if isinstance(result, Exception):
            raise result
        return result


class RecordingSleep:
    """실제로 기다리지 않고 요청된 대기시간(초)만 기록"""

    def __init__(self):
        self.calls: List[float] = []

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)
        await asyncio.sleep(0)


def make_test_run(steps_with_times, failed_status: Optional[int] = None, run_id: str = None) -> TestRun:
    """
    (step, response_time) 목록으로 TestRun 생성

    failed_status를 지정하면 마지막 스텝이 해당 상태코드로 실패한 실행이 된다.
    """
    test_run = TestRun(id=run_id) if run_id else TestRun()
    for index, (step, response_time) in enumerate(steps_with_times):
        is_last = index == len(steps_with_times) - 1
        if is_last and failed_status is not None:
            error = f'Step "{step.name}" failed: status {failed_status}'
            test_run.record(StepResult(step=step, response_time=response_time,
                                       response_status_code=failed_status, succeeded=False, error=error))
            test_run.abort(error)
        else:
            test_run.record(StepResult(step=step, response_time=response_time,
                                       response_status_code=step.expected_response_code))
    if test_run.state == TestRunState.RUNNING:
        test_run.complete()
    return test_run


@pytest.fixture
def registry() -> StepRegistry:
    return StepRegistry()


@pytest.fixture
def recording_sleep() -> RecordingSleep:
    return RecordingSleep()
