from __future__ import annotations

import json

import pytest

from pdfshrink.config import (
    ConfigurationError,
    ShrinkConfig,
    build_config,
    dump_config,
    select_output_mode,
    validate_config,
)
from pdfshrink.models import InPlace, LegacyRename, Rename, Subdirectory


def test_default_mode_is_rename() -> None:
    assert select_output_mode() == Rename("shrunk")
    assert select_output_mode(rename=True, suffix="small") == Rename("small")


def test_subdir_and_inplace_modes() -> None:
    assert select_output_mode(subdir="out") == Subdirectory("out")
    assert select_output_mode(inplace=True) == InPlace()


@pytest.mark.parametrize(
    "options",
    [
        {"inplace": True, "rename": True},
        {"rename": True, "subdir": "out"},
        {"inplace": True, "subdir": "out"},
        {"inplace": True, "rename": True, "subdir": "out"},
    ],
)
def test_conflicting_modes(options) -> None:
    with pytest.raises(ConfigurationError) as exc:
        select_output_mode(**options)
    assert exc.value.code == "MODE_CONFLICT"
    assert "mutually exclusive" in str(exc.value)


def test_validate_rejects_inplace() -> None:
    with pytest.raises(ConfigurationError) as exc:
        validate_config(ShrinkConfig(mode=InPlace()))
    assert exc.value.code == "UNSUPPORTED_MODE"


@pytest.mark.parametrize(
    ("mode", "code"),
    [(Rename(""), "INVALID_SUFFIX"), (Subdirectory(""), "INVALID_SUBDIR")],
)
def test_validate_rejects_empty_names(mode, code) -> None:
    with pytest.raises(ConfigurationError) as exc:
        validate_config(ShrinkConfig(mode=mode))
    assert exc.value.code == code


def test_validate_accepts_supported_modes() -> None:
    for mode in (Rename(), LegacyRename(), Subdirectory("out")):
        validate_config(ShrinkConfig(mode=mode))


def test_dump_config_roundtrips_through_json() -> None:
    config = build_config(subdir="out", dry_run=True, verbosity=2, debug=True)
    payload = json.loads(dump_config(config))
    assert payload["mode"] == {"kind": "subdir", "name": "out"}
    assert payload["dry_run"] is True
    assert payload["verbosity"] == 2
    assert payload["gs_program"] == "gs"
    assert payload["dry_run_program"] == "echo"
