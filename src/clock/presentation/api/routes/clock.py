"""
API for reading times on the Berlin clock.
"""
from typing import List

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from ....application.converter import TimeConverter
from .....common.exceptions import InvalidTimeFormat

app = FastAPI()

# Rows are always joined with "\n" over HTTP
_converter = TimeConverter(line_separator="\n")

class ClockReading(BaseModel):
    time: str
    rows: List[str]
    display: str

def get_converter() -> TimeConverter:
    return _converter

@app.get("/clock/{time}", response_model=ClockReading)
def read_clock(time: str):
    """Berlin clock rows for a HH:mm:ss time."""
    converter = get_converter()
    try:
        display = converter.convert(time)
    except InvalidTimeFormat as e:
        raise HTTPException(status_code=400, detail=str(e))
    return ClockReading(
        time=time,
        rows=list(display.lines()),
        display=display.to_text(converter.line_separator),
    )

@app.get("/health")
def health():
    return {"status": "ok"}
