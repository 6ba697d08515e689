from functools import lru_cache
from typing import Optional

from fastapi import FastAPI, Depends, HTTPException
from fastapi.responses import HTMLResponse

from . import config, schemas
from .pipeline import CapabilityReport, build_report
from .plotly_graph.plotly_render import report_html
from .plotly_graph.table import frame_records, table_page
from .records import LoadError

app = FastAPI()


@lru_cache(maxsize=1)
def _cached_report() -> CapabilityReport:
    return build_report(config.CSV_PATH)


def get_report() -> CapabilityReport:
    try:
        return _cached_report()
    except LoadError as e:
        raise HTTPException(500, str(e)) from e


@app.get("/", response_class=HTMLResponse, include_in_schema=False)
def ui(report: CapabilityReport = Depends(get_report)):
    return HTMLResponse(report_html(report, seed=config.LAYOUT_SEED))

@app.get("/graph", response_model=schemas.GraphOut)
def graph(report: CapabilityReport = Depends(get_report)):
    return {
        "nodes": frame_records(report.node_table()),
        "edges": frame_records(report.edge_table()),
    }

@app.get("/capabilities", response_model=schemas.CapabilityPage)
def capabilities(
    search: Optional[str] = None,
    sort_by: Optional[str] = None,
    descending: bool = False,
    page: int = 1,
    report: CapabilityReport = Depends(get_report),
):
    try:
        result = table_page(report.capability_table(), search=search, sort_by=sort_by,
                            descending=descending, page=page)
    except ValueError as e:
        raise HTTPException(400, str(e)) from e
    return {
        "rows": result.rows,
        "page": result.page,
        "page_size": result.page_size,
        "total": result.total,
        "pages": result.pages,
    }

@app.get("/health")
def health():
    return {"ok": True}
