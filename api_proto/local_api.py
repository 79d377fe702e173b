from typing import List

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
import pandas as pd

from fourmap_core.solve_map import generate_map_puzzle, solve_map_board

app = FastAPI()


class GenerateRequest(BaseModel):
    params: str = "12x12n32dn"  # "WxHnNdD" 形式
    seed: int | None = None


class SolveRequest(BaseModel):
    board: List[List[str]]  # 2D array of region labels
    clues: List[int] | None = None  # -1 = blank
    user_id: str | None = None


@app.post("/api/generate")
async def api_generate(request: GenerateRequest):
    """
    Generator API endpoint.
    Builds a puzzle from a parameter string and an optional seed.
    """
    result = generate_map_puzzle(request.params, seed=request.seed)
    if result["status"] != "ok":
        raise HTTPException(status_code=400, detail=result["message"])
    return result


@app.post("/api/solve")
async def api_solve(request: SolveRequest):
    """
    Solver API endpoint.
    Receives grid data (2D array), converts to DataFrame, and calls solver logic.
    """
    # 2D配列をDataFrameに変換
    df = pd.DataFrame(request.board)
    result = solve_map_board(df, clues=request.clues, user_id=request.user_id)
    if result["status"] != "ok":
        raise HTTPException(status_code=400, detail=result["message"])
    return result
