from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(
    prefix="",
    tags=["Root"],
    responses={404: {'description': 'Not found'}},
)

@router.get("/", response_class=PlainTextResponse)
async def root() -> str:
    return "SudharNayak API is running..."
