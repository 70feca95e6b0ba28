from __future__ import annotations

from pathlib import Path

import pytest

from pdfshrink.commands import (
    GS_OPTIONS,
    build_dry_run_command,
    build_real_command,
)


def test_real_command_layout() -> None:
    command = build_real_command("docs/report.pdf", "docs/report.shrunk.pdf")
    assert command.program == "gs"
    assert command.args[: len(GS_OPTIONS)] == GS_OPTIONS
    assert command.args[-2:] == ("-sOutputFile=docs/report.shrunk.pdf", "docs/report.pdf")
    assert command.argv[0] == "gs"
    assert len(command.argv) == len(GS_OPTIONS) + 3


def test_option_set_is_the_ebook_preset() -> None:
    assert GS_OPTIONS[:4] == ("-q", "-dBATCH", "-dSAFER", "-dNOPAUSE")
    assert "-sDEVICE=pdfwrite" in GS_OPTIONS
    assert "-dCompatibilityLevel=1.4" in GS_OPTIONS
    assert "-dPDFSETTINGS=/ebook" in GS_OPTIONS
    assert "-dAutoRotatePages=/None" in GS_OPTIONS
    for channel in ("Color", "Gray", "Mono"):
        assert f"-d{channel}ImageDownsampleType=/Bicubic" in GS_OPTIONS
        assert f"-d{channel}ImageResolution=135" in GS_OPTIONS


@pytest.mark.parametrize(
    ("inpath", "outpath"),
    [
        ("a.pdf", "a.shrunk.pdf"),
        ("spaced dir/strange'name.pdf", "spaced dir/out/strange'name.pdf"),
        (Path("/abs/x.pdf"), Path("/abs/x.cmp.pdf")),
    ],
)
def test_dry_run_mirrors_real_command(inpath, outpath) -> None:
    real = build_real_command(inpath, outpath)
    dry = build_dry_run_command(inpath, outpath)
    assert dry.program == "echo"
    assert dry.args == (real.program, *real.args)


def test_custom_programs() -> None:
    real = build_real_command("a.pdf", "b.pdf", program="gswin64c")
    dry = build_dry_run_command("a.pdf", "b.pdf", program="args", real_program="gswin64c")
    assert real.program == "gswin64c"
    assert dry.argv == ["args", *real.argv]


def test_render_quotes_arguments() -> None:
    command = build_real_command("spaced dir/a.pdf", "spaced dir/a.shrunk.pdf")
    rendered = command.render()
    assert rendered.startswith("gs -q -dBATCH")
    assert rendered.endswith("'-sOutputFile=spaced dir/a.shrunk.pdf' 'spaced dir/a.pdf'")
