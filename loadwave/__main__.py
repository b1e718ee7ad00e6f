"""
사용자 정의 테스트 모듈을 불러와 부하테스트를 실행하고 리포트를 출력합니다.

    LOAD_TEST_MODULE=my_load_test NUM_OF_THREADS=10 python -m loadwave
"""
import asyncio
import importlib
import logging
import sys

from loadwave.core.config import settings
from loadwave.services.report.report_renderer import render_report
from loadwave.services.testing.load_test_service import run_load_test

logger = logging.getLogger(__name__)


def load_user_defined_test(module_name: str) -> None:
    """add_step 호출이 들어있는 모듈을 import하여 스텝을 등록"""
    importlib.import_module(module_name)


def main() -> int:
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        load_user_defined_test(settings.LOAD_TEST_MODULE)
        report = asyncio.run(run_load_test(settings.get_load_test_config()))
    except Exception:
        logger.exception("Load test aborted")
        return 1

    print(render_report(report))
    return 0


if __name__ == "__main__":
    sys.exit(main())
