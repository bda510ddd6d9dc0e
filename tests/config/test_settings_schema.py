from pathlib import Path

import yaml


def test_settings_has_required_sections() -> None:
    data = yaml.safe_load(Path("config/settings.yaml").read_text(encoding="utf-8"))
    for key in ["telegram", "providers", "messages", "secrets"]:
        assert key in data
    for key in ["welcome", "thinking", "no_results", "search_error", "no_answer", "unexpected_error"]:
        assert data["messages"][key]
