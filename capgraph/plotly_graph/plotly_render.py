from __future__ import annotations

import html
import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from plotly import graph_objects as go

from ..pipeline import CapabilityReport
from .layout import graph_layout

logger = logging.getLogger(__name__)


def _hover_text(node) -> str:
    parts = [f"<b>{html.escape(node.id)}</b>", f"Category: {html.escape(node.category)}"]
    if node.definition:
        parts.append(html.escape(node.definition))
    parts.append(f"Degree: {node.degree_centrality}")
    parts.append(f"Closeness: {node.closeness_centrality:.3f}")
    return "<br>".join(parts)


def _edge_traces(report: CapabilityReport, pos: Dict[str, Tuple[float, float]]) -> List[go.Scatter]:
    edge_x: List[Optional[float]] = []
    edge_y: List[Optional[float]] = []
    labels: Dict[Tuple[str, str], List[str]] = {}

    for e in report.edges:
        if e.source not in pos or e.target not in pos:
            continue
        x0, y0 = pos[e.source]
        x1, y1 = pos[e.target]
        edge_x += [x0, x1, None]
        edge_y += [y0, y1, None]
        if e.label:
            labels.setdefault((e.source, e.target), []).append(e.label)

    edge_trace = go.Scatter(
        x=edge_x,
        y=edge_y,
        mode="lines",
        line=dict(width=1, color="#888"),
        hoverinfo="none",
        showlegend=False,
    )

    mid_x, mid_y, mid_text = [], [], []
    for (src, tgt), names in labels.items():
        x0, y0 = pos[src]
        x1, y1 = pos[tgt]
        mid_x.append((x0 + x1) / 2.0)
        mid_y.append((y0 + y1) / 2.0)
        mid_text.append("<br>".join(dict.fromkeys(names)))

    label_trace = go.Scatter(
        x=mid_x,
        y=mid_y,
        mode="text",
        text=mid_text,
        textfont=dict(size=8, color="#555"),
        hoverinfo="none",
        showlegend=False,
    )
    return [edge_trace, label_trace]


def _arrow_annotations(report: CapabilityReport, pos: Dict[str, Tuple[float, float]]) -> List[dict]:
    arrows = []
    for e in report.edges:
        if e.source == e.target or e.source not in pos or e.target not in pos:
            continue
        x0, y0 = pos[e.source]
        x1, y1 = pos[e.target]
        arrows.append(dict(
            x=x1, y=y1, ax=x0, ay=y0,
            xref="x", yref="y", axref="x", ayref="y",
            showarrow=True, arrowhead=2, arrowsize=1, arrowwidth=1,
            arrowcolor="#888", standoff=6, text="",
        ))
    return arrows


def build_plotly_figure(report: CapabilityReport, seed: int = 42) -> go.Figure:
    if not report.nodes:
        fig = go.Figure()
        fig.update_layout(title="No capability data found")
        return fig

    pos = graph_layout(report.graph, seed=seed)
    traces = _edge_traces(report, pos)

    # one marker trace per category so the legend doubles as a style key
    for category, style in report.styles.items():
        members = [n for n in report.nodes if n.category == category and n.id in pos]
        if not members:
            continue
        traces.append(go.Scatter(
            x=[pos[n.id][0] for n in members],
            y=[pos[n.id][1] for n in members],
            mode="markers+text",
            name=category,
            legendgroup=str(style.group),
            text=[n.id for n in members],
            textposition="top center",
            textfont=dict(size=9),
            hoverinfo="text",
            hovertext=[_hover_text(n) for n in members],
            customdata=[n.id for n in members],
            marker=dict(
                size=[n.size for n in members],
                color=style.color,
                symbol=style.shape,
                line=dict(width=1, color="#333"),
            ),
        ))

    fig = go.Figure(data=traces)
    fig.update_layout(
        showlegend=True,
        legend=dict(title="Category"),
        hovermode="closest",
        dragmode="pan",
        autosize=True,
        margin=dict(l=0, r=0, t=30, b=0),
        plot_bgcolor="white",
        paper_bgcolor="white",
        annotations=_arrow_annotations(report, pos),
        xaxis=dict(showgrid=False, zeroline=False, showticklabels=False),
        yaxis=dict(showgrid=False, zeroline=False, showticklabels=False, scaleanchor="x", scaleratio=1),
    )
    return fig


def build_table_figure(report: CapabilityReport) -> go.Figure:
    df = report.capability_table()
    df["definition"] = df["definition"].fillna("")
    df["closeness_centrality"] = df["closeness_centrality"].round(4)

    fig = go.Figure(data=[go.Table(
        header=dict(values=list(df.columns), fill_color="#E8E8E8", align="left"),
        cells=dict(values=[df[c].tolist() for c in df.columns], align="left"),
    )])
    fig.update_layout(margin=dict(l=0, r=0, t=0, b=0))
    return fig


def write_html(fig: go.Figure, out_path: Union[str, Path]) -> None:
    config = {"scrollZoom": True, "displayModeBar": True, "responsive": True}
    fig.write_html(str(out_path), include_plotlyjs="cdn", full_html=True, config=config)


def report_html(report: CapabilityReport, seed: int = 42, title: str = "Capability graph") -> str:
    config = {"scrollZoom": True, "displayModeBar": True, "responsive": True}
    graph_div = build_plotly_figure(report, seed=seed).to_html(
        full_html=False, include_plotlyjs="cdn", config=config, default_height="750px",
    )
    table_div = build_table_figure(report).to_html(full_html=False, include_plotlyjs=False)
    return (
        "<!DOCTYPE html>\n<html>\n<head>\n<meta charset=\"utf-8\">\n"
        f"<title>{html.escape(title)}</title>\n</head>\n<body>\n"
        f"<h1>{html.escape(title)}</h1>\n{graph_div}\n"
        f"<h2>Capabilities</h2>\n{table_div}\n</body>\n</html>\n"
    )


def write_report_html(report: CapabilityReport, out_path: Union[str, Path], seed: int = 42) -> Path:
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(report_html(report, seed=seed), encoding="utf-8")
    logger.info("Report written to %s", out_path)
    return out_path
