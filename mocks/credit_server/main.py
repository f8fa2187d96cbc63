from fastapi import FastAPI, Query
from pathlib import Path
from datetime import date
import json

app = FastAPI(title="Mock Credit Server", version="1.0.0")
DATA_DIR = Path(__file__).resolve().parents[1] / "credit_stub"


def load_limits() -> dict:
    return json.loads((DATA_DIR / "limits.json").read_text())


@app.get("/health")
def health(): return {"status": "ok"}


@app.get("/credit/limit")
def get_credit_limit(
    firstname: str = Query(..., min_length=1),
    surname: str = Query(..., min_length=1),
    date_of_birth: date = Query(...),
):
    stub = load_limits()
    key = f"{firstname} {surname} {date_of_birth.isoformat()}"
    return {"credit_limit": stub["applicants"].get(key, stub["default_limit"])}
