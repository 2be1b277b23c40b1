# Copyright 2026 Contentful Typegen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for loading the project file and resolving the run configuration."""

from pathlib import Path

import pytest

from contentful_typegen.config import (
    DEFAULT_OUT_FILE,
    PROJECT_FILE_NAME,
    CliOverrides,
    ProjectFile,
    TypegenConfig,
    TypegenConfigError,
    load_project_file,
    resolve_config,
)
from contentful_typegen.model.options import RenderOptions

# ###############
# Helpers
# ###############

_CREDENTIALS = {"CF_SPACE_ID": "env-space", "CF_ENV": "env-env", "CF_MANAGER_TOKEN": "env-token"}


def _write_project(tmp_path: Path, content: str) -> Path:
    path = tmp_path / PROJECT_FILE_NAME
    path.write_text(content, encoding="utf-8")
    return path


# ###############
# Project file
# ###############


class TestLoadProjectFile:
    def test_full_file(self, tmp_path: Path) -> None:
        content = """\
space: abc123
environment: staging
out: src/types/cf.d.ts
prefix: Cf
undefined-optionals: false
readonly-arrays: true
aliases: false
brand: false
format: false
"""
        project = load_project_file(_write_project(tmp_path, content))
        assert project == ProjectFile(
            space="abc123",
            environment="staging",
            out="src/types/cf.d.ts",
            prefix="Cf",
            undefined_optionals=False,
            readonly_arrays=True,
            aliases=False,
            brand=False,
            format=False,
        )

    def test_empty_file(self, tmp_path: Path) -> None:
        assert load_project_file(_write_project(tmp_path, "")) == ProjectFile()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(TypegenConfigError, match="not found"):
            load_project_file(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        with pytest.raises(TypegenConfigError, match="Invalid YAML"):
            load_project_file(_write_project(tmp_path, "space: [unclosed\n"))

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        with pytest.raises(TypegenConfigError, match="must be a YAML mapping"):
            load_project_file(_write_project(tmp_path, "- a\n- b\n"))

    def test_unknown_key(self, tmp_path: Path) -> None:
        with pytest.raises(TypegenConfigError, match="Invalid config file"):
            load_project_file(_write_project(tmp_path, "colour: blue\n"))

    def test_token_is_not_accepted(self, tmp_path: Path) -> None:
        with pytest.raises(TypegenConfigError):
            load_project_file(_write_project(tmp_path, "token: secret\n"))

    def test_wrong_type(self, tmp_path: Path) -> None:
        with pytest.raises(TypegenConfigError):
            load_project_file(_write_project(tmp_path, "brand: [1, 2]\n"))


# ###############
# Resolution
# ###############


class TestResolveConfig:
    def test_defaults_from_environment(self) -> None:
        config = resolve_config(CliOverrides(), _CREDENTIALS)
        assert config == TypegenConfig(
            space_id="env-space",
            environment_id="env-env",
            management_token="env-token",
            out_file=Path(DEFAULT_OUT_FILE),
            render_options=RenderOptions(),
            format_output=True,
        )

    def test_cli_wins_over_environment(self) -> None:
        overrides = CliOverrides(space_id="cli-space", environment_id="cli-env", management_token="cli-token")
        config = resolve_config(overrides, _CREDENTIALS)
        assert (config.space_id, config.environment_id, config.management_token) == (
            "cli-space",
            "cli-env",
            "cli-token",
        )

    def test_environment_wins_over_project_file(self) -> None:
        project = ProjectFile(space="file-space", environment="file-env")
        config = resolve_config(CliOverrides(), _CREDENTIALS, project)
        assert config.space_id == "env-space"
        assert config.environment_id == "env-env"

    def test_project_file_fills_missing_ids(self) -> None:
        project = ProjectFile(space="file-space", environment="file-env")
        config = resolve_config(CliOverrides(), {"CF_MANAGER_TOKEN": "t"}, project)
        assert config.space_id == "file-space"
        assert config.environment_id == "file-env"

    def test_render_options_from_project_file(self) -> None:
        project = ProjectFile(prefix="Cf", undefined_optionals=False, readonly_arrays=True, aliases=False, brand=False)
        config = resolve_config(CliOverrides(), _CREDENTIALS, project)
        assert config.render_options == RenderOptions(
            prefix="Cf",
            include_undefined_on_optional=False,
            arrays_readonly=True,
            prefer_linked_aliases=False,
            brand_content_type_id=False,
        )

    def test_cli_toggles_win_over_project_file(self) -> None:
        project = ProjectFile(prefix="Cf", readonly_arrays=False, out="a.d.ts", format=True)
        overrides = CliOverrides(prefix="X", arrays_readonly=True, out_file="b.d.ts", format_output=False)
        config = resolve_config(overrides, _CREDENTIALS, project)
        assert config.render_options.prefix == "X"
        assert config.render_options.arrays_readonly is True
        assert config.out_file == Path("b.d.ts")
        assert config.format_output is False

    def test_empty_prefix_is_kept(self) -> None:
        config = resolve_config(CliOverrides(prefix=""), _CREDENTIALS)
        assert config.render_options.prefix == ""

    @pytest.mark.parametrize("missing", ["CF_SPACE_ID", "CF_ENV", "CF_MANAGER_TOKEN"])
    def test_missing_credential(self, missing: str) -> None:
        environ = {k: v for k, v in _CREDENTIALS.items() if k != missing}
        with pytest.raises(TypegenConfigError, match="Missing required inputs"):
            resolve_config(CliOverrides(), environ)

    def test_empty_credential_counts_as_missing(self) -> None:
        with pytest.raises(TypegenConfigError):
            resolve_config(CliOverrides(), {**_CREDENTIALS, "CF_MANAGER_TOKEN": ""})
