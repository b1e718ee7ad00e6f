"""
HTTP 전송 모듈

스텝에 정의된 요청을 실제로 전송하고 상태코드/응답 body/소요시간을 반환합니다.
네트워크 오류가 발생해도 예외를 던지지 않고 상태코드가 없는 응답으로 반환합니다.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

import httpx


logger = logging.getLogger(__name__)


@dataclass
class HttpTransportConfig:
    """HTTP 전송 설정"""
    timeout_seconds: Optional[float] = None  # None이면 타임아웃 없음

    @classmethod
    def from_settings(cls):
        """settings에서 설정값을 가져와서 HttpTransportConfig 생성"""
        from loadwave.core.config import settings
        http_config = settings.get_http_config()
        return cls(timeout_seconds=http_config['timeout_seconds'])


@dataclass
class TransportResponse:
    """전송 결과 (status_code가 None이면 응답을 받지 못한 것)"""
    status_code: Optional[int]
    body: Any = None
    headers: Dict[str, str] = field(default_factory=dict)
    elapsed_ms: Optional[float] = None
    error: Optional[str] = None

    @property
    def has_response(self) -> bool:
        return self.status_code is not None


class HttpTransport:
    """httpx 기반 HTTP 전송 클라이언트"""

    def __init__(
        self,
        config: Optional[HttpTransportConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Args:
            config: 전송 설정 (미지정시 기본값)
            transport: httpx 하위 transport (테스트에서 MockTransport 주입용)
        """
        self.config = config or HttpTransportConfig()
        self._transport = transport
        self.client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self):
        """비동기 컨텍스트 매니저 진입"""
        await self._ensure_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """비동기 컨텍스트 매니저 종료"""
        await self.aclose()

    async def _ensure_client(self):
        """HTTP 클라이언트 생성 (필요시)"""
        if self.client is None or self.client.is_closed:
            timeout = httpx.Timeout(self.config.timeout_seconds)
            self.client = httpx.AsyncClient(timeout=timeout, transport=self._transport)

    async def aclose(self):
        if self.client and not self.client.is_closed:
            await self.client.aclose()
        self.client = None

    async def send(
        self,
        method: str,
        url: str,
        headers: Optional[Mapping[str, str]] = None,
        body: Any = None
    ) -> TransportResponse:
        """
        요청 전송

        Args:
            method: HTTP 메서드 (소문자)
            url: 절대 URL
            headers: 요청 헤더
            body: 요청 body (dict/list는 JSON, str/bytes는 그대로 전송)

        Returns:
            TransportResponse: 응답 정보. 연결 실패 등은 status_code=None으로 반환
        """
        await self._ensure_client()

        request_kwargs: Dict[str, Any] = {"headers": dict(headers or {})}
        if body is not None:
            if isinstance(body, (str, bytes)):
                request_kwargs["content"] = body
            else:
                request_kwargs["json"] = body

        started_at = time.perf_counter()
        try:
            response = await self.client.request(method.upper(), url, **request_kwargs)
        except httpx.HTTPError as e:
            elapsed_ms = (time.perf_counter() - started_at) * 1000
            logger.warning(f"Request {method.upper()} {url} failed without response: {e!r}")
            return TransportResponse(
                status_code=None,
                elapsed_ms=elapsed_ms,
                error=f"{type(e).__name__}: {e}"
            )

        elapsed_ms = (time.perf_counter() - started_at) * 1000
        return TransportResponse(
            status_code=response.status_code,
            body=self._parse_body(response),
            headers=dict(response.headers),
            elapsed_ms=elapsed_ms
        )

    @staticmethod
    def _parse_body(response: httpx.Response) -> Any:
        """JSON 응답은 파싱하고, 그 외에는 텍스트 그대로 반환"""
        try:
            return response.json()
        except ValueError:
            return response.text


# 전역 전송 클라이언트 인스턴스 관리
_http_transport: Optional[HttpTransport] = None


async def get_http_transport() -> HttpTransport:
    """
    HTTP 전송 클라이언트 인스턴스 반환 (싱글톤)

    Returns:
        HttpTransport 인스턴스
    """

    global _http_transport

    if _http_transport is None:
        _http_transport = HttpTransport(HttpTransportConfig.from_settings())
        await _http_transport._ensure_client()

    return _http_transport


async def close_http_transport():
    """전역 HTTP 전송 클라이언트 종료"""

    global _http_transport

    if _http_transport is not None:
        await _http_transport.aclose()
        _http_transport = None
