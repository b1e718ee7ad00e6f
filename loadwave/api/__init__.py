from fastapi import APIRouter

from loadwave.api.load_testing_router import router as load_testing_router

api_router = APIRouter()
api_router.include_router(
    load_testing_router,
    prefix= "/load-testing",
    tags=["Load Testing"]
)
