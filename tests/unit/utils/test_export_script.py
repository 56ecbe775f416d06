import importlib.util
import json
from pathlib import Path

import pytest

SCRIPT_PATH = Path(__file__).resolve().parents[3] / "scripts" / "export_graph_json.py"


@pytest.fixture(scope="module")
def export_script():
    spec = importlib.util.spec_from_file_location("export_graph_json", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture(autouse=True)
def quiet_logging(export_script, monkeypatch):
    monkeypatch.setattr(export_script, "setup_logging", lambda **kwargs: None)


def test_export_template_to_file(export_script, tmp_path) -> None:
    output = tmp_path / "out" / "ml.json"

    assert export_script.main(["machine learning", "-o", str(output)]) == 0

    data = json.loads(output.read_text(encoding="utf-8"))
    assert data["nodes"][0]["id"] == "machine-learning"


def test_export_generic_to_stdout_is_seeded(export_script, capsys) -> None:
    export_script.main(["Tide pools", "--seed", "3"])
    first = capsys.readouterr().out
    export_script.main(["Tide pools", "--seed", "3"])
    second = capsys.readouterr().out

    assert first == second
    assert '"tide-pools"' in first


def test_list_templates(export_script, capsys) -> None:
    assert export_script.main(["--list-templates"]) == 0
    assert capsys.readouterr().out.split() == [
        "machine-learning",
        "quantum-computing",
        "web-development",
    ]


def test_missing_topic(export_script) -> None:
    assert export_script.main([]) == 2
