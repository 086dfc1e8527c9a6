# siftcheck/main.py
import logging

from fastapi import Depends, FastAPI, Request, Response
from starlette.concurrency import run_in_threadpool

from .config import Settings, get_settings
from .handler import handle_request

logging.basicConfig(
    level=get_settings().LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="SIFT News Verification")

VERIFY_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


# --- Routes ---

@app.get("/health")
def health(settings: Settings = Depends(get_settings)):
    return {
        "ok": True,
        "model": settings.QIANFAN_MODEL or "default",
        "configured": settings.is_configured,
    }


@app.api_route("/verify-news", methods=VERIFY_METHODS)
async def verify_news(request: Request, settings: Settings = Depends(get_settings)):
    """
    SIFT verification of a claim and its source:
    - OPTIONS is a CORS preflight, answered with an empty 200
    - POST {content, source?} returns the verification report
    - anything else is a 405
    """
    body = await request.body()
    # the upstream call blocks, keep it off the event loop
    result = await run_in_threadpool(handle_request, request.method, body, settings)
    return Response(content=result.body, status_code=result.status_code, headers=result.headers)
