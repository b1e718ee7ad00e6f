import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI

from loadwave.api import api_router
from loadwave.core.config import settings
from loadwave.common.exceptionhandler import register_exception_handler
from loadwave.services.transport.http_transport import close_http_transport

# 로깅 설정
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 라이프사이클 관리"""
    logger.info("Starting Loadwave API...")

    yield

    logger.info("Shutting down Loadwave API...")
    await close_http_transport()


app = FastAPI(
    title="Loadwave API",
    description="HTTP 스텝 시나리오를 가상 사용자 웨이브로 실행하고 결과를 집계하는 API입니다.",
    version="1.0.0",
    docs_url="/api/swagger",
    lifespan=lifespan
)

app.include_router(api_router)

register_exception_handler(app)
