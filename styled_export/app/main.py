# styled_export/app/main.py

import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from .. import __version__
from ..config import Settings
from ..errors import EditorRootNotFound, StylesheetFetchError
from ..export_html import export_document
from ..scraper import load_document

logger = logging.getLogger(__name__)

settings = Settings()

app = FastAPI(
    title="Styled HTML Export API",
    description="Turns an editor page into one self-contained, styled HTML document",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],       # For local development; tighten in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class ExportRequest(BaseModel):
    html: str
    theme_name: Optional[str] = None
    base_url: Optional[str] = None


@app.post("/export")
async def export(payload: ExportRequest):
    """
    1) Parse the submitted editor page
    2) Sanitize the editor markup
    3) Download linked stylesheets and keep only the rules the page uses
    4) Return the assembled document plus its parts
    """
    theme_name = payload.theme_name or settings.theme

    try:
        exported = await export_document(
            load_document(payload.html),
            theme_name,
            base_url=payload.base_url,
            timeout=settings.fetch_timeout,
        )
    except EditorRootNotFound as e:
        raise HTTPException(status_code=422, detail=str(e))
    except StylesheetFetchError as e:
        raise HTTPException(status_code=502, detail=str(e))

    return {
        "html": exported.html,
        "style": exported.style,
        "body_html": exported.body_html,
        "theme_name": exported.theme_name,
    }


@app.get("/health")
async def health_check():
    return {"status": "healthy", "service": "styled-export"}


def run():
    logging.basicConfig(level=settings.log_level.upper())
    uvicorn.run("styled_export.app.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
