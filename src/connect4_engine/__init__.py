"""
Connect Four decision engine: board model, static evaluator and a
depth-limited alpha-beta search.

The two calls a game controller needs are re-exported here:

    best_move(board, depth, token) -> SearchResult
    evaluate(board, token) -> float
"""
from connect4_engine.ai.search import SearchResult, best_move
from connect4_engine.core.board import Board, NO_ROW
from connect4_engine.core.scoring import evaluate

__all__ = ["Board", "NO_ROW", "SearchResult", "best_move", "evaluate"]
