from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
from typing import List, Optional
import uvicorn

from catsearch.application.search_service import CatSearchService
from catsearch.domain.errors import QueryError
from catsearch.infrastructure.ranker import DEFAULT_TOP_K
from catsearch.infrastructure.corpus_loader import JsonCorpusSource

# ── Configuration ────────────────────────────────────────────────────────────
DATA_DIRECTORY = "data"
PORT = 3000

# ── API Models ───────────────────────────────────────────────────────────────
class TitleSchema(BaseModel):
    index: int
    excerpt: str
    highlightWord: str
    excerpt1: str
    excerpt2: str

class ResultSchema(BaseModel):
    key: str
    size: str
    coat: str
    color: str
    description: str
    did_you_know: str
    paragraphId: int
    totalScore: float
    title: Optional[TitleSchema] = None

class StatusResponse(BaseModel):
    state: str
    is_ready: bool
    entries_indexed: int
    error: Optional[str] = None

# Initialize infrastructure (global scope for singleton behavior)
search_service = CatSearchService(
    corpus_source=JsonCorpusSource.from_directory(DATA_DIRECTORY),
    top_k=DEFAULT_TOP_K,
)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # A broken corpus must stop the server from serving at all.
    try:
        search_service.build_index()
    except Exception as error:
        print(f"[API] Refusing to start: {error}")
        raise
    print("[API] Index ready. Service is READY.")
    yield

# ── App Initialization ───────────────────────────────────────────────────────
app = FastAPI(
    title="Cat Breed Search API",
    description="Fuzzy keyword search over a catalog of cat breeds.",
    version="1.0.0",
    lifespan=lifespan,
)

# ── CORS Middleware ──────────────────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["*"],
)

# ── Endpoints ────────────────────────────────────────────────────────────────
@app.get("/")
def read_root():
    return {
        "message": "Cat breed search API is running.",
        "status": search_service.state.value,
    }

@app.get("/status", response_model=StatusResponse)
def get_status():
    """Returns the index lifecycle state."""
    index = search_service.index
    return StatusResponse(
        state=search_service.state.value,
        is_ready=search_service.is_ready(),
        entries_indexed=len(index) if index is not None else 0,
        error=search_service.error,
    )

@app.get("/search", response_model=List[ResultSchema])
def search(q: Optional[str] = Query(default=None)):
    if not search_service.is_ready():
        raise HTTPException(status_code=400, detail="Bad request: search index is not ready.")

    try:
        results = search_service.search(q)
    except (QueryError, RuntimeError) as error:
        raise HTTPException(status_code=400, detail=f"Bad request: {error}")

    print(f"[API] search '{q}' -> {len(results)} results")
    return [r.to_dict() for r in results]

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=PORT)
