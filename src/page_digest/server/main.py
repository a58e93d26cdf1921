import logging
import os
from dataclasses import replace
from typing import Optional
from fastapi import FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from .models import ErrorResponse, SummarizeTextRequest, SummaryResponse, TextSummaryResponse
from ..config import load_config
from ..log import setup_logging
from ..errors import DigestError, InvalidURLError
from ..pipeline import summarize_page
from ..summarizer import summarize_locally

setup_logging(os.environ.get("PAGE_DIGEST_LOG_LEVEL", "INFO").upper())
logger = logging.getLogger(__name__)

CONFIG = load_config()

app = FastAPI(title="Page Digest", version="0.1")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # dev friendly; tighten later
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

ERROR_RESPONSES = {code: {"model": ErrorResponse} for code in (400, 415, 422, 500, 502)}

@app.exception_handler(DigestError)
async def _digest_error(request: Request, exc: DigestError):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

@app.exception_handler(Exception)
async def _unexpected_error(request: Request, exc: Exception):
    logger.exception("summarize error: %r", exc)
    return JSONResponse(status_code=500, content={"message": "サマリーの生成に失敗しました。"})

@app.get("/health")
def health():
    return {"ok": True}

@app.get("/api/summarize", response_model=SummaryResponse, responses=ERROR_RESPONSES)
async def summarize_url(url: Optional[str] = Query(None, description="Page URL to summarize")):
    if not url:
        raise InvalidURLError("URLを指定してください。")
    page = await summarize_page(url, CONFIG)
    return SummaryResponse(title=page.title, text=page.text, source_url=page.source_url, method=page.method)

@app.post("/api/summarize/text", response_model=TextSummaryResponse, responses=ERROR_RESPONSES)
def summarize_plain_text(req: SummarizeTextRequest):
    overrides = {k: v for k, v in (("ideal_length", req.ideal_length), ("max_chars", req.max_chars)) if v is not None}
    sc = replace(CONFIG.summary, **overrides)
    return TextSummaryResponse(text=summarize_locally(req.text, sc))
