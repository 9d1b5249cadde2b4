from pathlib import Path

import pytest

from metatags.rules.loader import default_rules, load_meta_rules
from metatags.rules.models import MetaRules

PROJECT_ROOT = Path(__file__).parent.parent.parent


def test_default_rules():
    rules = default_rules()
    assert rules.title.separator == " | "
    assert rules.title.max_length == 70
    assert rules.description.max_length == 160
    assert rules.robots is None
    assert rules.og == {}


def test_load_project_rules():
    rules = load_meta_rules(PROJECT_ROOT / "meta_tags.yaml")
    assert isinstance(rules, MetaRules)
    assert rules.robots == "index, follow"
    assert rules.og == {"type": "website"}


def test_load_fenced_yaml(tmp_path):
    path = tmp_path / "meta.md"
    path.write_text(
        "# Meta tags\n\n"
        "```yaml\n"
        "title:\n"
        "  site_title: Example\n"
        "  max_length: 40\n"
        "```\n"
        "Trailing prose.\n"
    )
    rules = load_meta_rules(path)
    assert rules.title.site_title == "Example"
    assert rules.title.max_length == 40


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "meta.yaml"
    path.write_text("")
    assert load_meta_rules(path) == MetaRules()


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError, match="not found"):
        load_meta_rules(tmp_path / "nope.yaml")


def test_invalid_yaml(tmp_path):
    path = tmp_path / "meta.yaml"
    path.write_text("title: [unclosed\n")
    with pytest.raises(ValueError, match="Invalid YAML"):
        load_meta_rules(path)


def test_invalid_schema(tmp_path):
    path = tmp_path / "meta.yaml"
    path.write_text("title:\n  max_length: 0\n")
    with pytest.raises(ValueError, match="validation failed"):
        load_meta_rules(path)
