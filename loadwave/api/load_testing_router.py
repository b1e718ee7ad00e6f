import logging

from fastapi import APIRouter, Depends

from loadwave.common.response.code import SuccessCode
from loadwave.common.response.response_template import ResponseTemplate
from loadwave.schemas.load_test.load_test_request import LoadTestRequest
from loadwave.services.report.report_renderer import render_report
from loadwave.services.testing.load_test_service import run_load_test
from loadwave.services.testing.step_registry import build_registry_from_request
from loadwave.services.transport.http_transport import HttpTransport, get_http_transport

router = APIRouter()
logger = logging.getLogger(__name__)

@router.post(
    path="",
    summary="부하테스트 실행 API",
    description="""
    스텝 목록과 실행 설정을 입력받아 부하테스트를 실행하고, 모든 웨이브가 끝나면 리포트를 반환합니다.

    ## 📝 요청 파라미터

    ### steps (배열)
    등록 순서대로 모든 가상 사용자가 실행합니다. 앞 스텝이 실패하면 이후 스텝은 실행되지 않습니다.
    - **name**: 스텝 이름 (string) - 리포트 집계 키
    - **method**: HTTP 메서드 (string) - get, head, post, put, patch, delete
    - **url**: 요청 URL (string) - 프로토콜 생략시 is_https에 따라 http/https 사용
    - **expected_response_code**: 기대 상태코드 (int, 100 ~ 599)
    - **is_https**: https 사용 여부 (bool, optional)
    - **body**: 요청 body (optional)
    - **headers**: 요청 헤더 (object, optional) - 기본 JSON 헤더를 덮어씀
    - **sleep_before_next_step_in_ms**: 다음 스텝 전 대기시간 (int, optional)

    ### 실행 설정 (optional)
    - **num_of_threads**: 웨이브당 가상 사용자 수 (기본 64)
    - **num_of_repetitions**: 웨이브 수 (기본 1)
    - **max_time_before_starting_in_ms**: 가상 사용자 시작 지연 최댓값 (기본 8000)

    ## 📤 응답값
    - **report**: 집계 결과
    - **report_text**: 콘솔 출력 형식의 리포트
    """,
)
async def run_load_testing(
        request: LoadTestRequest,
        transport: HttpTransport = Depends(get_http_transport),
):
    # 1. 요청 전용 스텝 저장소 생성 (검증 실패시 LoadTestException)
    registry = build_registry_from_request(request)

    # 2. 부하테스트 실행 및 집계
    report = await run_load_test(request.config_params(), registry=registry, transport=transport)
    logger.info(f"부하테스트 완료: {report.overview.performed_tests}건, 에러율 {report.overview.error_rate:.2f}%")

    return ResponseTemplate.success(
        SuccessCode.LOAD_TEST_COMPLETED, {
        "report": report.model_dump(mode="json"),
        "report_text": render_report(report),
    })
