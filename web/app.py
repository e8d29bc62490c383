"""
FastAPI web application for the engine.

Exposes a single REST endpoint (POST /api/move). The client sends every
move played so far; the server replays them from the initial position,
lets the computer move for the side to move, and returns that move.

Architecture notes:
- Sync endpoint (not async): FastAPI runs sync handlers in a thread pool,
  which is the correct pattern for CPU-bound blocking calls like the search.
- Stateless per request: the client sends the full move list each time and
  every request builds its own board, so nothing is shared between the
  worker threads and nothing outlives the request.
"""

import logging

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, field_validator

from minichess.constants import DEFAULT_DEPTH, DEFAULT_STRATEGY, MAX_WEB_DEPTH
from minichess.evaluate import evaluate
from minichess.game import GameState
from minichess.moves import Move, NoMoveAvailable
from minichess.strategy import make_strategy

# ---------------------------------------------------------------------------
# Setup
# ---------------------------------------------------------------------------

logging.basicConfig(level=logging.INFO)
_log = logging.getLogger(__name__)

app = FastAPI(title="MiniChess", version="1.0.0")


# ---------------------------------------------------------------------------
# Request / response models
# ---------------------------------------------------------------------------


class MoveRequest(BaseModel):
    """
    Client request to the engine.

    Fields:
        moves:    Moves played so far in coordinate notation ("a2a3"),
                  starting with White from the initial position.
        depth:    Search depth in plies, clamped to [0, MAX_WEB_DEPTH]. The
                  search has no time limit, so depth is what bounds the cost
                  of a request.
        strategy: "minimax" or "random-capture".
        seed:     Optional seed for random-capture.
    """

    moves: list[str] = []
    depth: int = DEFAULT_DEPTH
    strategy: str = DEFAULT_STRATEGY
    seed: int | None = None

    @field_validator("depth")
    @classmethod
    def clamp_depth(cls, v: int) -> int:
        """Clamp depth to a safe operating range."""
        return max(0, min(v, MAX_WEB_DEPTH))


class MoveResponse(BaseModel):
    """
    Engine response.

    Fields:
        move:   The engine's move in coordinate notation, or None when the
                side to move had no legal move and forfeited.
        board:  FEN piece placement after the engine's move.
        score:  Material balance after the move, positive when Black is ahead.
        depth:  Depth the search ran at.
        winner: "white" or "black" once the game has ended, else None.
    """

    move: str | None
    board: str
    score: int
    depth: int
    winner: str | None


# ---------------------------------------------------------------------------
# API routes
# ---------------------------------------------------------------------------


@app.post("/api/move", response_model=MoveResponse)
def api_move(request: MoveRequest) -> MoveResponse:
    """
    Replay the client's moves and answer with the engine's move.

    Raises:
        HTTPException 400: Unreadable or illegal move, game already over,
                           or unknown strategy.
        HTTPException 500: The engine failed while choosing a move.
    """
    # --- Replay the game so far ---
    state = GameState.new()
    for ply, text in enumerate(request.moves):
        try:
            move = Move.from_uci(text)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=f"Invalid move {text!r}: {exc}") from exc
        if not state.push(move):
            raise HTTPException(status_code=400, detail=f"Illegal move {text!r} at ply {ply}")

    winner = state.winner()
    if winner is not None:
        raise HTTPException(status_code=400, detail=f"Game is already over: {winner} won")

    try:
        strategy = make_strategy(request.strategy, depth=request.depth, seed=request.seed)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    # --- Let the engine move ---
    try:
        move = state.computer_move(strategy)
    except NoMoveAvailable:
        forfeit_winner = state.turn.opponent
        _log.info("No legal move for %s after %d plies", state.turn, len(request.moves))
        return MoveResponse(
            move=None,
            board=state.board.board_fen(),
            score=evaluate(state.board),
            depth=request.depth,
            winner=str(forfeit_winner),
        )
    except Exception as exc:
        _log.exception("Engine search failed after moves=%s", " ".join(request.moves))
        raise HTTPException(status_code=500, detail=f"Engine error: {exc}") from exc

    winner = state.winner()
    _log.info(
        "Move=%s strategy=%s depth=%d plies=%d winner=%s",
        move.uci(),
        request.strategy,
        request.depth,
        len(request.moves),
        winner,
    )

    return MoveResponse(
        move=move.uci(),
        board=state.board.board_fen(),
        score=evaluate(state.board),
        depth=request.depth,
        winner=str(winner) if winner is not None else None,
    )
