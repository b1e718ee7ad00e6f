from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional


def default_assertion_function(response: Any) -> None:
    """기본 검증: 응답이 존재하고 body 속성을 가지고 있어야 한다"""
    if response is None:
        raise AssertionError("expected a response but got none")
    if not hasattr(response, "body"):
        raise AssertionError("expected response to have a body")


@dataclass(frozen=True)
class Step:
    """등록된 HTTP 요청 스텝 (등록 이후 변경 불가)"""
    name: str
    method: str
    url: str
    expected_response_code: int
    is_https: bool = False
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Optional[Any] = None
    assertion_function: Callable[[Any], Any] = default_assertion_function
    sleep_before_next_step_in_ms: int = 0
