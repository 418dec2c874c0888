from __future__ import annotations

import logging
import threading
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from swearjar import config
from swearjar.engines.base import MatchEngine
from swearjar.engines.composite import CompositeEngine
from swearjar.engines.factory import build_engine
from swearjar.wordlists.loader import load_word_file

logger = logging.getLogger(__name__)


class TextRequest(BaseModel):
    text: str


class WordsRequest(BaseModel):
    words: List[str] = Field(min_length=1)


class ConfigureRequest(BaseModel):
    use_literal: bool = True
    use_pattern: bool = True
    use_trie: bool = True


class CheckResponse(BaseModel):
    contains_match: bool


class CensorResponse(BaseModel):
    text: str
    censored: str
    changed: bool


class WordsResponse(BaseModel):
    added: int


def _default_engine() -> MatchEngine:
    engine = build_engine(config.STRATEGY, config.MASK_CHAR)
    if config.WORDLIST_PATH is not None:
        load_word_file(engine, config.WORDLIST_PATH)
    return engine


def create_app(*, engine: Optional[MatchEngine] = None) -> FastAPI:
    app = FastAPI(title="Swearjar API")
    app.state.engine = engine if engine is not None else _default_engine()
    # Word additions mutate the engine; reads and writes share one lock.
    lock = threading.Lock()

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    @app.post("/check", response_model=CheckResponse)
    def check(payload: TextRequest) -> CheckResponse:
        with lock:
            matched = app.state.engine.contains_match(payload.text)
        return CheckResponse(contains_match=matched)

    @app.post("/censor", response_model=CensorResponse)
    def censor(payload: TextRequest) -> CensorResponse:
        with lock:
            censored = app.state.engine.censor(payload.text)
        return CensorResponse(
            text=payload.text, censored=censored, changed=censored != payload.text
        )

    @app.post("/words", response_model=WordsResponse)
    def add_words(payload: WordsRequest) -> WordsResponse:
        with lock:
            app.state.engine.load_words(payload.words)
        added = sum(1 for word in payload.words if word.strip())
        logger.info("Added %d words via API", added)
        return WordsResponse(added=added)

    @app.post("/configure", response_model=ConfigureRequest)
    def configure(payload: ConfigureRequest) -> ConfigureRequest:
        current = app.state.engine
        if not isinstance(current, CompositeEngine):
            raise HTTPException(
                status_code=409, detail="Only the composite engine can be configured"
            )
        with lock:
            current.configure(payload.use_literal, payload.use_pattern, payload.use_trie)
        return payload

    return app
