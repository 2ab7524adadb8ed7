from __future__ import annotations

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from structure_analyzer.errors import RootNotFoundError
from structure_analyzer.model import AnalysisReport
from structure_analyzer.report import analyze


app = FastAPI(title="Project Structure Analyzer")


class AnalyzeRequest(BaseModel):
	root_path: str


def _analyze(req: AnalyzeRequest, mode: str) -> AnalysisReport:
	try:
		return analyze(req.root_path, mode)
	except RootNotFoundError as e:
		raise HTTPException(status_code=400, detail=str(e))


@app.post("/classify", response_model=AnalysisReport, response_model_exclude_none=True)
def classify(req: AnalyzeRequest) -> AnalysisReport:
	return _analyze(req, "classify")


@app.post("/scan", response_model=AnalysisReport, response_model_exclude_none=True)
def scan(req: AnalyzeRequest) -> AnalysisReport:
	return _analyze(req, "scan")


def create_app() -> FastAPI:
	return app
