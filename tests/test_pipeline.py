"""End-to-end tests for capgraph/pipeline.py."""
import pytest

from capgraph import config
from capgraph.pipeline import (
    CAPABILITY_COLUMNS,
    EDGE_COLUMNS,
    NODE_COLUMNS,
    build_report,
    build_report_from_records,
)
from capgraph.records import LoadError
from tests.conftest import SIMPLE_CSV, CHAIN_CSV


class TestBuildReport:
    def test_duplicate_example(self, simple_csv_path):
        report = build_report(simple_csv_path)
        assert len(report.records) == 1
        assert [(n.id, n.category) for n in report.nodes] == [
            ("Risk Mgmt", "Finance"),
            ("Credit Risk", "Other"),
        ]
        assert [(e.source, e.target, e.label) for e in report.edges] == [
            ("Risk Mgmt", "Credit Risk", "owns"),
        ]

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(LoadError):
            build_report(tmp_path / "absent.csv")

    def test_idempotent(self, write_csv):
        path = write_csv(CHAIN_CSV + SIMPLE_CSV.split("\n", 1)[1])
        first = build_report(path)
        second = build_report(path)
        assert first.node_table().equals(second.node_table())
        assert first.edge_table().equals(second.edge_table())
        assert first.capability_table().equals(second.capability_table())

    def test_empty_records(self):
        report = build_report_from_records([])
        assert report.nodes == []
        assert report.styles == {}
        assert report.node_table().empty
        assert list(report.node_table().columns) == NODE_COLUMNS

    def test_sample_data_file(self):
        report = build_report(config.ROOT / "data" / "capabilities.csv")
        names = {r.c_name for r in report.records} | {r.sub_name for r in report.records}
        assert {n.id for n in report.nodes} == names
        assert all(n.category for n in report.nodes)
        assert "Other" in report.styles
        for e in report.edges:
            assert " " not in e.label


class TestTables:
    def test_node_table(self, chain_report):
        df = chain_report.node_table()
        assert list(df.columns) == NODE_COLUMNS
        assert df["id"].tolist() == df["label"].tolist() == ["A", "B", "C", "D"]
        assert df["size"].tolist() == [10, 15, 15, 10]
        assert df["group"].tolist() == [1, 2, 2, 2]

    def test_edge_table(self, chain_report):
        df = chain_report.edge_table()
        assert list(df.columns) == EDGE_COLUMNS
        assert df["from"].tolist() == ["A", "B", "C"]
        assert df["to"].tolist() == ["B", "C", "D"]
        assert set(df["arrows"]) == {"to"}
        assert df["label"].tolist()[-1] == "is_part_of"

    def test_capability_table(self, chain_report):
        df = chain_report.capability_table()
        assert list(df.columns) == CAPABILITY_COLUMNS
        row = df.set_index("name").loc["A"]
        assert row["category"] == "Core"
        assert row["definition"] == "First"
        assert row["degree_centrality"] == 1
        assert row["closeness_centrality"] == pytest.approx(0.5)
