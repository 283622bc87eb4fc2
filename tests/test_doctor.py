from __future__ import annotations

from pathlib import Path

from docscanon.doctor import doctor_payload, render_doctor_text
from helpers import fake_tool, make_context


def test_doctor_reports_present_and_missing_tools(repo: Path, bin_dir: Path) -> None:
    fake_tool(bin_dir, "protoc", "exit 0\n")
    payload = doctor_payload(make_context(repo))
    rows = {row["name"]: row for row in payload["tools"]}
    assert rows["protoc"]["status"] == "ok"
    assert rows["protoc"]["path"].endswith("protoc")
    assert rows["rstcheck"]["status"] == "missing"
    assert rows["graphql"]["executable"] == "node"
    assert payload["config_source"] == "<defaults>"


def test_doctor_text_lists_install_hints(repo: Path) -> None:
    text = render_doctor_text(doctor_payload(make_context(repo)))
    assert "tools:" in text
    assert "install: npm install -g markdownlint-cli" in text
