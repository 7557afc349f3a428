from typing import Optional
from uuid import uuid4

import uvicorn
from fastapi import Body, FastAPI, HTTPException, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, field_validator

from .config import ALLOWED_ORIGINS, HOST, MAX_SESSIONS, PORT, SESSION_COOKIE_MAX_AGE
from .logging_utils import setup_logging
from .models import AppState
from .randomizer import CLASSES, RACES
from .workflow import GenerationWorkflow

logger = setup_logging()

app = FastAPI(title="heroforge", docs_url=None, redoc_url=None, openapi_url=None)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# in-memory, least recently used first; capped at MAX_SESSIONS
SESSIONS: dict[str, GenerationWorkflow] = {}


def new_workflow() -> GenerationWorkflow:
    return GenerationWorkflow()


# ─────────────────────────────────────────────
# session helpers
# ─────────────────────────────────────────────
def get_sid(req: Request, resp: Response) -> str:
    sid = req.query_params.get("sid") or req.cookies.get("sid")
    if sid:
        return sid

    sid = uuid4().hex
    resp.set_cookie(
        "sid", sid,
        max_age=SESSION_COOKIE_MAX_AGE,
        path="/",
        samesite="none", secure=True,
    )
    return sid


def get_workflow(sid: str) -> GenerationWorkflow:
    wf = SESSIONS.pop(sid, None)
    if wf is None:
        _evict(MAX_SESSIONS - 1)
        wf = new_workflow()
        logger.debug("new session %s", sid)
    SESSIONS[sid] = wf
    return wf


def _evict(keep: int) -> None:
    while SESSIONS and len(SESSIONS) > keep:
        sid = next(iter(SESSIONS))
        SESSIONS.pop(sid).reset()
        logger.info("evicted session %s", sid)


def _out(sid: str, state: AppState) -> dict:
    return {"sid": sid, **state.model_dump()}


# ─────────────────────────────────────────────
# Pydantic bodies
# ─────────────────────────────────────────────
class DraftIn(BaseModel):
    name: Optional[str] = None
    race: Optional[str] = None
    character_class: Optional[str] = None
    special_elements: Optional[str] = None
    include_random_traits: Optional[bool] = None

    @field_validator("race")
    @classmethod
    def known_race(cls, v):
        if v is not None and v not in RACES:
            raise ValueError(f"unknown race {v!r}")
        return v

    @field_validator("character_class")
    @classmethod
    def known_class(cls, v):
        if v is not None and v not in CLASSES:
            raise ValueError(f"unknown class {v!r}")
        return v


# ─────────────────────────────────────────────
# routes
# ─────────────────────────────────────────────
@app.get("/")
def health():
    return {"ok": True}


@app.get("/options")
def options():
    return {"races": RACES, "classes": CLASSES}


@app.get("/state")
async def get_state(req: Request, resp: Response):
    sid = get_sid(req, resp)
    return _out(sid, get_workflow(sid).snapshot())


@app.put("/draft")
async def put_draft(req: Request, resp: Response, body: DraftIn = Body(...)):
    sid = get_sid(req, resp)
    wf  = get_workflow(sid)
    if wf.state.is_loading:
        raise HTTPException(409, "A character is being generated")
    state = wf.update_draft(**body.model_dump(exclude_none=True))
    return _out(sid, state)


@app.post("/randomize")
async def randomize(req: Request, resp: Response):
    sid = get_sid(req, resp)
    wf  = get_workflow(sid)
    if wf.state.is_loading:
        raise HTTPException(409, "A character is being generated")
    return _out(sid, wf.randomize())


@app.post("/generate")
async def generate(req: Request, resp: Response):
    sid = get_sid(req, resp)
    state = await get_workflow(sid).generate()
    return _out(sid, state)


@app.post("/reset")
async def reset(req: Request, resp: Response):
    sid = get_sid(req, resp)
    return _out(sid, get_workflow(sid).reset())


def run():
    uvicorn.run("heroforge.main:app", host=HOST, port=PORT)
