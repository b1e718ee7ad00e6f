"""
Tests for the virtual user executor: sequential steps, abort on first failure
and conversion of transport errors into failed step results.
"""
import logging

import pytest

from conftest import FakeTransport, RecordingSleep, make_response
from loadwave.common.exception import LoadTestException
from loadwave.common.response.code import FailureCode
from loadwave.models.test_run import TestRunState
from loadwave.services.testing.step_registry import StepRegistry
from loadwave.services.testing.virtual_user_executor import VirtualUserExecutor


@pytest.mark.asyncio
async def test_run_executes_all_steps_in_order(registry: StepRegistry, recording_sleep: RecordingSleep) -> None:
    registry.add_step(name="one", method="get", url="svc/one", expected_response_code=200,
                      sleep_before_next_step_in_ms=100)
    registry.add_step(name="two", method="post", url="svc/two", expected_response_code=200, body={"a": 1})
    transport = FakeTransport()

    test_run = await VirtualUserExecutor(transport, sleep=recording_sleep).run(registry.steps)

    assert test_run.state == TestRunState.COMPLETED
    assert test_run.succeeded is True
    assert test_run.error is None
    assert [step_data.step.name for step_data in test_run.steps_data] == ["one", "two"]
    assert all(step_data.succeeded for step_data in test_run.steps_data)
    assert [call[:2] for call in transport.calls] == [("get", "http://svc/one"), ("post", "http://svc/two")]
    assert transport.calls[1][3] == {"a": 1}
    assert recording_sleep.calls == [0.1]


@pytest.mark.asyncio
async def test_step_results_reference_registered_steps(registry: StepRegistry) -> None:
    step = registry.add_step(name="one", method="get", url="svc", expected_response_code=200)

    test_run = await VirtualUserExecutor(FakeTransport()).run(registry.steps)

    assert test_run.steps_data[0].step is step


@pytest.mark.asyncio
async def test_status_mismatch_fails_step_and_run(registry: StepRegistry) -> None:
    registry.add_step(name="home", method="get", url="svc", expected_response_code=200)
    transport = FakeTransport(make_response(500, body={"message": "boom"}))

    test_run = await VirtualUserExecutor(transport).run(registry.steps)

    step_data = test_run.steps_data[0]
    assert test_run.state == TestRunState.ABORTED
    assert test_run.succeeded is False
    assert step_data.succeeded is False
    assert step_data.response_status_code == 500
    assert step_data.error.startswith('Step "home" failed: Got errors asserting the Status Code')
    assert 'Received body: {"message": "boom"}' in step_data.error
    assert test_run.error == step_data.error


@pytest.mark.asyncio
async def test_failure_aborts_remaining_steps_and_skips_delay(
        registry: StepRegistry, recording_sleep: RecordingSleep) -> None:
    registry.add_step(name="first", method="get", url="svc/1", expected_response_code=200,
                      sleep_before_next_step_in_ms=100)
    registry.add_step(name="second", method="post", url="svc/2", expected_response_code=201,
                      sleep_before_next_step_in_ms=200)
    registry.add_step(name="third", method="get", url="svc/3", expected_response_code=200)
    transport = FakeTransport(make_response(200))

    test_run = await VirtualUserExecutor(transport, sleep=recording_sleep).run(registry.steps)

    assert len(test_run.steps_data) == 2
    assert test_run.steps_data[0].succeeded is True
    assert test_run.steps_data[1].succeeded is False
    assert len(transport.calls) == 2
    assert recording_sleep.calls == [0.1]


@pytest.mark.asyncio
async def test_transport_exception_becomes_failed_step(registry: StepRegistry) -> None:
    registry.add_step(name="home", method="get", url="svc", expected_response_code=200)
    transport = FakeTransport(ConnectionRefusedError("connection refused"))

    test_run = await VirtualUserExecutor(transport).run(registry.steps)

    step_data = test_run.steps_data[0]
    assert test_run.succeeded is False
    assert step_data.response_status_code is None
    assert "expected a response but got none" in step_data.error
    assert "ConnectionRefusedError" in step_data.error
    assert step_data.response_time is not None


@pytest.mark.asyncio
async def test_response_without_status_fails_step(registry: StepRegistry) -> None:
    registry.add_step(name="home", method="get", url="svc", expected_response_code=200)
    transport = FakeTransport(make_response(None, error="ConnectError: unreachable", elapsed_ms=3.0))

    test_run = await VirtualUserExecutor(transport).run(registry.steps)

    step_data = test_run.steps_data[0]
    assert step_data.succeeded is False
    assert step_data.response_time == 3.0
    assert "ConnectError: unreachable" in step_data.error
    assert step_data.error.endswith("Received body: null")


@pytest.mark.asyncio
async def test_assertion_function_failure_fails_step(registry: StepRegistry) -> None:
    received = []

    def assert_has_token(response):
        received.append(response)
        if "token" not in response.body:
            raise AssertionError("token missing")

    registry.add_step(name="login", method="post", url="svc/login", expected_response_code=200,
                      assertion_function=assert_has_token)
    transport = FakeTransport(make_response(200, body={"user": "a"}))

    test_run = await VirtualUserExecutor(transport).run(registry.steps)

    step_data = test_run.steps_data[0]
    assert step_data.succeeded is False
    assert step_data.response_status_code == 200
    assert 'Got errors asserting Response: AssertionError: token missing' in step_data.error
    assert 'Received body: {"user": "a"}' in step_data.error
    assert received[0].status_code == 200


@pytest.mark.asyncio
async def test_assertion_function_is_not_run_when_status_check_fails(registry: StepRegistry) -> None:
    calls = []
    registry.add_step(name="home", method="get", url="svc", expected_response_code=200,
                      assertion_function=calls.append)

    await VirtualUserExecutor(FakeTransport(make_response(404))).run(registry.steps)

    assert calls == []


@pytest.mark.asyncio
async def test_response_time_uses_transport_elapsed_time(registry: StepRegistry) -> None:
    registry.add_step(name="home", method="get", url="svc", expected_response_code=200)

    test_run = await VirtualUserExecutor(FakeTransport(make_response(200, elapsed_ms=42.5))).run(registry.steps)

    assert test_run.steps_data[0].response_time == 42.5


@pytest.mark.asyncio
async def test_run_without_steps_is_a_configuration_error() -> None:
    with pytest.raises(LoadTestException) as exc_info:
        await VirtualUserExecutor(FakeTransport()).run(())

    assert exc_info.value.code == FailureCode.NO_STEPS_REGISTERED


@pytest.mark.asyncio
async def test_each_run_gets_a_unique_id(registry: StepRegistry) -> None:
    registry.add_step(name="home", method="get", url="svc", expected_response_code=200)
    executor = VirtualUserExecutor(FakeTransport())

    first = await executor.run(registry.steps)
    second = await executor.run(registry.steps)

    assert first.id != second.id


@pytest.mark.asyncio
async def test_failed_step_logs_indented_response_body(registry: StepRegistry, caplog) -> None:
    registry.add_step(name="home", method="get", url="svc", expected_response_code=200)
    transport = FakeTransport(make_response(500, body={"message": "boom"}))

    with caplog.at_level(logging.DEBUG, logger="loadwave.services.testing.virtual_user_executor"):
        await VirtualUserExecutor(transport).run(registry.steps)

    assert 'Response body:\n{\n  "message": "boom"\n}' in caplog.text
