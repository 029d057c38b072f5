from __future__ import annotations

from pathlib import Path

import pytest

from protoattrs.config import (
    BuilderOverrideStep,
    ProtoAttrsConfig,
    RawAttributesStep,
    SerdeAsStep,
    SerdeStep,
    TemplateStep,
    load_config,
)
from protoattrs.exceptions import ConfigError


@pytest.fixture(autouse=True)
def isolated_home(temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a real ~/.config/protoattrs/config.yaml out of these tests."""
    monkeypatch.setattr(Path, "home", lambda: temp_dir / "home")


def test_load_defaults_when_no_config(clean_env: None, temp_dir: Path) -> None:
    """Test that defaults are used when no config file exists."""
    import os

    os.chdir(temp_dir)

    config = load_config()

    assert isinstance(config, ProtoAttrsConfig)
    assert config.steps == []
    assert config.out_dir == Path("generated")
    assert config.manifest_name == "attributes.yaml"
    assert config.known_entities is None
    assert config.verbosity == "warning"


def test_load_project_config(todo_project: Path) -> None:
    """Test loading steps from ./protoattrs.yaml."""
    config = load_config()

    assert config.sources == [Path("protos/todo.proto")]
    assert config.include_paths == [Path("protos")]
    assert config.out_dir == Path("gen")
    assert [type(s) for s in config.steps] == [
        SerdeStep,
        TemplateStep,
        BuilderOverrideStep,
        BuilderOverrideStep,
        TemplateStep,
        TemplateStep,
        RawAttributesStep,
    ]
    serde = config.steps[0]
    assert isinstance(serde, SerdeStep)
    assert serde.serialize and serde.deserialize
    assert serde.extra == ['#[serde(rename_all = "camelCase")]']


def test_explicit_config_path(clean_env: None, temp_dir: Path) -> None:
    custom = temp_dir / "custom.yaml"
    custom.write_text(
        """
steps:
  - capability: serde_as
    message: todo.Todo
    fields:
      - fields: [status]
        attribute: '#[serde_as(as = "DisplayFromStr")]'
"""
    )

    config = load_config(custom)

    step = config.steps[0]
    assert isinstance(step, SerdeAsStep)
    assert step.fields[0].fields == ["status"]


def test_missing_explicit_config_raises(clean_env: None, temp_dir: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_config(temp_dir / "absent.yaml")


def test_env_var_overrides(todo_project: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that PROTOATTRS_* environment variables override the file."""
    monkeypatch.setenv("PROTOATTRS_OUT_DIR", "env-out")
    monkeypatch.setenv("PROTOATTRS_VERBOSITY", "debug")

    config = load_config()

    assert config.out_dir == Path("env-out")
    assert config.verbosity == "debug"


def test_user_config_is_lowest_priority(
    clean_env: None, temp_dir: Path
) -> None:
    import os

    os.chdir(temp_dir)
    user_config = temp_dir / "home" / ".config" / "protoattrs" / "config.yaml"
    user_config.parent.mkdir(parents=True)
    user_config.write_text("manifest_name: user.yaml\nverbosity: info\n")
    (temp_dir / "protoattrs.yaml").write_text("verbosity: error\n")

    config = load_config()

    assert config.manifest_name == "user.yaml"
    assert config.verbosity == "error"


def test_unknown_capability_raises_config_error(
    clean_env: None, temp_dir: Path
) -> None:
    import os

    os.chdir(temp_dir)
    (temp_dir / "protoattrs.yaml").write_text(
        """
steps:
  - capability: protobuf_magic
    names: [a.B]
"""
    )

    with pytest.raises(ConfigError) as exc_info:
        load_config()

    assert exc_info.value.field is not None
    assert exc_info.value.field.startswith("steps.0")


def test_invalid_yaml_raises_config_error(clean_env: None, temp_dir: Path) -> None:
    import os

    os.chdir(temp_dir)
    (temp_dir / "protoattrs.yaml").write_text("steps: [unclosed\n")

    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_config()


def test_non_mapping_yaml_raises_config_error(
    clean_env: None, temp_dir: Path
) -> None:
    import os

    os.chdir(temp_dir)
    (temp_dir / "protoattrs.yaml").write_text("- just\n- a list\n")

    with pytest.raises(ConfigError, match="mapping"):
        load_config()


def test_manifest_name_must_be_bare(clean_env: None, temp_dir: Path) -> None:
    import os

    os.chdir(temp_dir)
    (temp_dir / "protoattrs.yaml").write_text("manifest_name: ../escape.yaml\n")

    with pytest.raises(ConfigError, match="bare file name"):
        load_config()
