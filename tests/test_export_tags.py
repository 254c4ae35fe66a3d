"""Tests for the tag export script."""

from __future__ import annotations

import importlib.util
import json
import sys
from pathlib import Path
from types import ModuleType
from unittest.mock import patch

import pytest

from venus_tags.errors import TagCollectionError
from venus_tags.extractors.models import ContractTag

SCRIPT_PATH = Path(__file__).parent.parent / "scripts" / "export_tags.py"

TAG = ContractTag(
    contract_address="eip155:56:0xabc",
    public_name_tag="vBNB Token",
    project_name="Venus v4",
    website_link="https://venus.io/",
    public_note="Venus v4's official Venus BNB token (Isolated)",
)


@pytest.fixture
def export_tags(monkeypatch: pytest.MonkeyPatch) -> ModuleType:
    """Load the export script as a module."""
    spec = importlib.util.spec_from_file_location("export_tags", SCRIPT_PATH)
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    monkeypatch.setitem(sys.modules, "export_tags", module)
    spec.loader.exec_module(module)
    return module


def test_main_writes_json_file(export_tags: ModuleType, tmp_path: Path) -> None:
    """Test tags are written to the output file in registry shape."""
    output = tmp_path / "tags.json"

    with patch.object(export_tags, "collect_all_tags", return_value=[TAG]) as mock_collect:
        export_tags.main("56", "test-key", output)

    mock_collect.assert_called_once_with("56", "test-key")
    assert json.loads(output.read_text(encoding="utf-8")) == [TAG.to_dict()]


def test_main_prints_to_stdout(export_tags: ModuleType, capsys: pytest.CaptureFixture[str]) -> None:
    """Test tags are printed when no output file is given."""
    with patch.object(export_tags, "collect_all_tags", return_value=[TAG]):
        export_tags.main("56", "test-key")

    assert json.loads(capsys.readouterr().out) == [TAG.to_dict()]


def test_main_exits_on_error(export_tags: ModuleType, capsys: pytest.CaptureFixture[str]) -> None:
    """Test collection failures exit with status 1."""
    error = TagCollectionError("Error fetching Venus markets: HTTP error! status: 500")

    with patch.object(export_tags, "collect_all_tags", side_effect=error):
        with pytest.raises(SystemExit) as exc_info:
            export_tags.main("56", "test-key")

    assert exc_info.value.code == 1
    assert "HTTP error! status: 500" in capsys.readouterr().err
