from fastapi import FastAPI, Depends, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.concurrency import run_in_threadpool

from c4backend.app.core.settings import load_settings
from c4backend.app.schemas.game_schema import GameStatus, MoveRequest, AIMoveResponse, SessionCreated
from c4backend.app.services.game_session import GameSession
from c4backend.app.services.session_registry import SessionRegistry, registry

settings = load_settings()

app = FastAPI(title="Connect Four Engine")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Dependency for API routes
def get_registry() -> SessionRegistry:
    return registry


def _get_session(session_id: int, sessions: SessionRegistry) -> GameSession:
    session = sessions.get(session_id)
    if not session:
        raise HTTPException(status_code=404, detail="Session not found")
    return session


def _ensure_idle(session_id: int, sessions: SessionRegistry):
    if session_id in sessions.processing_ids:
        raise HTTPException(status_code=409, detail="AI move in progress")


@app.post("/sessions", response_model=SessionCreated)
async def create_session(sessions: SessionRegistry = Depends(get_registry)):
    session_id = sessions.create()
    return SessionCreated(id=session_id, status=sessions.get(session_id).snapshot())


@app.get("/sessions/{session_id}", response_model=GameStatus)
async def get_status(session_id: int, sessions: SessionRegistry = Depends(get_registry)):
    session = _get_session(session_id, sessions)
    # The AI move is applied on a worker thread; wait for it to finish
    _ensure_idle(session_id, sessions)
    return session.snapshot()


@app.post("/sessions/{session_id}/reset", response_model=GameStatus)
async def reset_session(session_id: int, sessions: SessionRegistry = Depends(get_registry)):
    session = _get_session(session_id, sessions)
    _ensure_idle(session_id, sessions)
    return session.reset()


@app.post("/sessions/{session_id}/move", response_model=GameStatus)
async def make_move(session_id: int, move: MoveRequest, sessions: SessionRegistry = Depends(get_registry)):
    session = _get_session(session_id, sessions)
    _ensure_idle(session_id, sessions)
    if not session.attempt_move(move.column, move.player):
        raise HTTPException(status_code=400, detail=f"Invalid move: column {move.column}")
    return session.snapshot()


@app.post("/sessions/{session_id}/switch-turn", response_model=GameStatus)
async def switch_turn(session_id: int, sessions: SessionRegistry = Depends(get_registry)):
    session = _get_session(session_id, sessions)
    _ensure_idle(session_id, sessions)
    session.switch_turn()
    return session.snapshot()


@app.post("/sessions/{session_id}/ai-move", response_model=AIMoveResponse)
async def ai_move(session_id: int, sessions: SessionRegistry = Depends(get_registry)):
    """Runs the search off the event loop. One search per session at a time."""
    session = _get_session(session_id, sessions)
    _ensure_idle(session_id, sessions)

    sessions.processing_ids.add(session_id)
    try:
        column = await run_in_threadpool(session.request_ai_move)
    finally:
        sessions.processing_ids.discard(session_id)

    return AIMoveResponse(column=column, status=session.snapshot())


@app.delete("/sessions/{session_id}", status_code=status.HTTP_200_OK)
async def delete_session(session_id: int, sessions: SessionRegistry = Depends(get_registry)):
    if not sessions.delete(session_id):
        raise HTTPException(status_code=404, detail="Session not found")
    return {"message": f"Session {session_id} deleted"}
