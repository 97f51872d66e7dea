"""FastAPI application exposing the hash-matching core over HTTP."""

from __future__ import annotations

import logging
from typing import Any, List

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from blockguess.config import AppConfig
from blockguess.errors import BlockGuessError
from blockguess.hashing.normalizer import normalize, with_prefix
from blockguess.hashing.tokenizer import tokenize
from blockguess.matching.distance import classify
from blockguess.matching.encoding import encode_match_list, toggle_selection
from blockguess.matching.matcher import find_matches
from blockguess.matching.offset import derive_offset
from blockguess.models import GuessSubmission, MatchPolicy, TokenizeMode
from blockguess.pipeline import Verifier
from blockguess.validation import validate_submission

LOGGER = logging.getLogger(__name__)

app = FastAPI(title="blockguess API", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


class NormalizePayload(BaseModel):
    value: str


class TokenizePayload(BaseModel):
    value: str
    size: int = AppConfig().token_size
    mode: TokenizeMode = AppConfig().tokenize_mode


class MatchPayload(BaseModel):
    guess_hash: str
    fetched_hash: str
    size: int = AppConfig().token_size
    mode: TokenizeMode = AppConfig().tokenize_mode
    policy: MatchPolicy = AppConfig().match_policy
    strict: bool = False


class ClassifyPayload(BaseModel):
    distance: int
    thresholds: List[int] | None = None
    complex: bool = False


class OffsetPayload(BaseModel):
    seed_hash: str
    target_block: int
    modulus: int = AppConfig().complex_modulus


class VerifyPayload(BaseModel):
    guess_hash: str
    fetched_hash: str
    target_block: int
    current_block: int
    complex: bool = False
    derived_hash: str | None = None
    size: int = AppConfig().token_size
    mode: TokenizeMode = AppConfig().tokenize_mode
    policy: MatchPolicy = AppConfig().match_policy


class SelectPayload(BaseModel):
    selected: List[str] = []
    token: str


class SubmissionPayload(BaseModel):
    actual_hash: str = ""
    secret_hash: str = ""
    dummy_hash: str = ""
    token_size: int = 0
    block_increment: int = 0


def _bad_request(exc: BlockGuessError) -> HTTPException:
    LOGGER.debug("Rejected request: %s", exc)
    return HTTPException(status_code=400, detail=str(exc))


@app.on_event("startup")
async def startup_event() -> None:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")


@app.post("/normalize")
async def normalize_hash(payload: NormalizePayload) -> dict[str, Any]:
    try:
        value = normalize(payload.value)
    except BlockGuessError as exc:
        raise _bad_request(exc) from exc
    return {"hash": value, "prefixed": with_prefix(value)}


@app.post("/tokenize")
async def tokenize_hash(payload: TokenizePayload) -> dict[str, Any]:
    try:
        tokens = tokenize(normalize(payload.value), payload.size, payload.mode)
    except BlockGuessError as exc:
        raise _bad_request(exc) from exc
    return {"mode": payload.mode, "size": payload.size, "tokens": tokens}


@app.post("/matches")
async def match_hashes(payload: MatchPayload) -> dict[str, Any]:
    try:
        guess = tokenize(normalize(payload.guess_hash), payload.size, payload.mode)
        fetched = tokenize(normalize(payload.fetched_hash), payload.size, payload.mode)
        result = find_matches(guess, fetched, payload.policy, strict=payload.strict)
    except BlockGuessError as exc:
        raise _bad_request(exc) from exc
    return {
        "policy": result.policy,
        "count": result.count,
        "matches": result.matches,
        "encoded": encode_match_list(result),
    }


@app.post("/classify")
async def classify_distance(payload: ClassifyPayload) -> dict[str, Any]:
    thresholds = payload.thresholds
    if thresholds is None:
        thresholds = list(AppConfig().thresholds_for(payload.complex))
    try:
        result = classify(payload.distance, thresholds)
    except BlockGuessError as exc:
        raise _bad_request(exc) from exc
    return {"classification": result}


@app.post("/offset")
async def complex_offset(payload: OffsetPayload) -> dict[str, Any]:
    try:
        result = derive_offset(payload.seed_hash, payload.target_block, payload.modulus)
    except BlockGuessError as exc:
        raise _bad_request(exc) from exc
    return {"offset": result}


@app.post("/verify")
async def verify_guess(payload: VerifyPayload) -> dict[str, Any]:
    config = AppConfig(token_size=payload.size, tokenize_mode=payload.mode, match_policy=payload.policy)
    derived_hash = payload.derived_hash
    fetcher = (lambda _block: derived_hash) if derived_hash is not None else None
    verifier = Verifier(config, fetch_block_hash=fetcher)
    try:
        result = verifier.verify(
            payload.guess_hash,
            payload.fetched_hash,
            payload.target_block,
            payload.current_block,
            complex_mode=payload.complex,
        )
    except BlockGuessError as exc:
        raise _bad_request(exc) from exc
    return {"matched": result.matched, "result": result}


@app.post("/validate")
async def validate_guess(payload: SubmissionPayload) -> dict[str, Any]:
    errors = validate_submission(GuessSubmission(**payload.model_dump()))
    return {"valid": not errors, "errors": errors}


@app.post("/select")
async def select_match(payload: SelectPayload) -> dict[str, Any]:
    """Toggle a matched token in the claim selection."""
    limit = AppConfig().selection_limit
    try:
        selected = toggle_selection(payload.selected, payload.token, limit)
    except BlockGuessError as exc:
        raise _bad_request(exc) from exc
    return {"selected": selected, "limit": limit}
