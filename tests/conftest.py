"""Shared fixtures for the capgraph test suite."""
import pytest

from capgraph.pipeline import build_report, build_report_from_records
from capgraph.records import read_relationship_text


# ── CSV constants ──

SIMPLE_CSV = """\
c_name,sub_name,relation,category,definition
Risk Mgmt,Credit Risk,owns,Finance,Controls risk exposure
Risk Mgmt,Credit Risk,owns,Finance,Controls risk exposure
"""

CHAIN_CSV = """\
c_name,sub_name,relation,category,definition
A,B,feeds,Core,First
B,C,feeds,Core,Second
C,D,is part of,Edge,Third
"""

TARGET_FIRST_CSV = """\
c_name,sub_name,relation,category,definition
Hub,Spoke,owns,Ops,The hub
Spoke,Leaf,owns,Sales,The spoke
"""

PARALLEL_CSV = """\
c_name,sub_name,relation,category,definition
Payments,Ledger,posts to,Ops,
Payments,Ledger,reads from,Ops,
Payments,Payments,retries,Ops,
"""

NO_OPTIONAL_CSV = """\
c_name,sub_name,relation
X,Y,links
"""

MANY_CATEGORIES_CSV = "c_name,sub_name,relation,category,definition\n" + "".join(
    f"N{i},T{i},rel,Cat{i},\n" for i in range(12)
)


def build_report_text(text):
    return build_report_from_records(read_relationship_text(text))


@pytest.fixture
def write_csv(tmp_path):
    def _write(text, name="capabilities.csv"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def chain_report():
    return build_report_text(CHAIN_CSV)


@pytest.fixture
def simple_csv_path(write_csv):
    return write_csv(SIMPLE_CSV)


@pytest.fixture
def sample_report(write_csv):
    return build_report(write_csv(CHAIN_CSV + "E,A,owns,Core,Fifth\nLonely,Lonely,self,Solo,\n"))
