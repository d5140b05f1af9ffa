# FastAPI backend for the expense NL → SQL assistant

from functools import lru_cache

from fastapi import Depends, FastAPI
from pydantic import BaseModel

import config
from nl_to_sql_pipeline import NLToSQLPipeline, build_default_pipeline

config.setup_logging()

app = FastAPI(title="Expense NL → SQL Assistant")


class QueryRequest(BaseModel):
    query: str


class QueryResponse(BaseModel):
    status: str
    question: str
    answer: str
    sql: str | None = None
    row_count: int | None = None
    error: str | None = None
    stage: str


@lru_cache(maxsize=1)
def get_pipeline() -> NLToSQLPipeline:
    return build_default_pipeline()


@app.post("/query", response_model=QueryResponse)
def query_db(req: QueryRequest, pipeline: NLToSQLPipeline = Depends(get_pipeline)):
    return pipeline.run(req.query)


@app.get("/health")
def health():
    return {"status": "ok"}
