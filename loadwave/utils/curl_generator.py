"""
실패한 스텝을 직접 재현하기 위한 진단 문자열 유틸리티
"""
import json
from typing import Any

from loadwave.models.step import Step


def serialize_body(body: Any) -> str:
    """
    응답 body를 에러 메시지용 한 줄 문자열로 직렬화

    JSON 직렬화가 불가능한 객체(순환 참조 등)는 repr로 대체한다.
    """
    try:
        return json.dumps(body, ensure_ascii=False)
    except (TypeError, ValueError):
        return repr(body)


def prettify_obj(obj: Any) -> str:
    """
    로그 출력용 들여쓰기 JSON 문자열

    JSON 직렬화가 불가능한 객체는 repr로 대체한다.
    """
    try:
        return json.dumps(obj, indent=2, ensure_ascii=False)
    except (TypeError, ValueError):
        return repr(obj)


def generate_curl_from_step(step: Step) -> str:
    """
    스텝과 동일한 요청을 보내는 curl 명령어 생성

    Args:
        step: 재현할 스텝

    Returns:
        str: 복사해서 바로 실행할 수 있는 curl 명령어
    """
    parts = ["curl -i"]
    parts.append("--head" if step.method == "head" else f"-X {step.method.upper()}")

    for header_key, header_value in step.headers.items():
        parts.append(f'-H "{header_key}: {header_value}"')

    if step.body:
        parts.append(f"-d '{serialize_body(step.body)}'")

    parts.append(f'"{step.url}"')
    return " ".join(parts)
