import pytest

from gmdoc.config import Config, ConfigError, Rule, load_config


def _write(tmp_path, text, name="cfg.yaml"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_load_full_rule(tmp_path):
    path = _write(
        tmp_path,
        "outputs:\n"
        "  docs.md:\n"
        "    - base_dir: src\n"
        "      include: ['*.go', '*.py']\n"
        "      exclude: ['test_*.go']\n"
        "      exclude_dirs: [vendor]\n"
        "      section_heading: Code\n"
        "      description: Some files\n",
    )
    config = load_config(path)
    assert list(config.outputs) == ["docs.md"]
    assert config.outputs["docs.md"] == [
        Rule(
            base_dir="src",
            include=["*.go", "*.py"],
            exclude=["test_*.go"],
            exclude_dirs=["vendor"],
            section_heading="Code",
            description="Some files",
        )
    ]


def test_outputs_keep_file_order(tmp_path):
    path = _write(
        tmp_path,
        "outputs:\n  b.md:\n    - base_dir: x\n  a.md:\n    - base_dir: y\n",
    )
    config = load_config(path)
    assert list(config.outputs) == ["b.md", "a.md"]
    assert config.outputs["a.md"][0].base_dir == "y"


def test_missing_fields_default_to_empty(tmp_path):
    path = _write(tmp_path, "outputs:\n  out.md:\n    - base_dir: here\n")
    rule = load_config(path).outputs["out.md"][0]
    assert rule.include == []
    assert rule.exclude == []
    assert rule.exclude_dirs == []
    assert rule.section_heading == ""
    assert rule.description == ""


def test_empty_outputs_mapping_is_accepted(tmp_path):
    path = _write(tmp_path, "outputs: {}\n")
    assert load_config(path) == Config(outputs={})


def test_missing_outputs_section(tmp_path):
    path = _write(tmp_path, "something_else: 1\n")
    with pytest.raises(ConfigError, match="'outputs' section missing in configuration"):
        load_config(path)


def test_null_outputs_section(tmp_path):
    path = _write(tmp_path, "outputs:\n")
    with pytest.raises(ConfigError, match="'outputs' section missing"):
        load_config(path)


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="failed to open config file"):
        load_config(tmp_path / "absent.yaml")


def test_empty_file(tmp_path):
    path = _write(tmp_path, "")
    with pytest.raises(ConfigError, match="failed to decode config"):
        load_config(path)


def test_invalid_yaml(tmp_path):
    path = _write(tmp_path, "outputs: [unclosed\n")
    with pytest.raises(ConfigError, match="failed to decode config"):
        load_config(path)


def test_wrong_list_type_is_rejected(tmp_path):
    path = _write(tmp_path, "outputs:\n  a.md:\n    - include: {x: 1}\n")
    with pytest.raises(ConfigError, match="failed to decode config"):
        load_config(path)


def test_from_mapping_none_gives_default_rule():
    assert Rule.from_mapping(None) == Rule()


def test_from_mapping_rejects_non_mapping():
    with pytest.raises(ConfigError):
        Rule.from_mapping(["base_dir"])