from pydantic import BaseModel
from typing import Any, Dict, Optional

class StepRequest(BaseModel):
    name: str
    method: str                                  # get, head, post, put, patch, delete
    url: str                                     # 프로토콜 생략 가능 (is_https로 결정)
    expected_response_code: int
    is_https: bool = False
    body: Optional[Any] = None
    headers: Optional[Dict[str, str]] = None
    sleep_before_next_step_in_ms: int = 0
