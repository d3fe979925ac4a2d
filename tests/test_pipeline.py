"""Tests for the pipeline driver."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from arise_setup.inject import CSP_META
from arise_setup.pipeline import PLUGINS_STEP, STEPS, run_pipeline, select_steps
from arise_setup.project import ProjectContext
from arise_setup.results import Idempotency, MutationStep, StepResult, StepStatus


def test_step_order() -> None:
    """Test steps run in the fixed order."""
    assert [s.name for s in STEPS] == [
        "csp",
        "launcher",
        PLUGINS_STEP,
        "network-security-config",
        "config-xml",
        "placeholders",
    ]


def test_only_csp_merges() -> None:
    """Test index.html injection is the only merge-on-absence step."""
    merging = [s.name for s in STEPS if s.idempotency is Idempotency.MERGE_ON_ABSENCE]
    assert merging == ["csp"]


def test_select_steps_without_plugins() -> None:
    """Test disabling plugins keeps the order and swaps only that step."""
    steps = select_steps(with_plugins=False)

    assert [s.name for s in steps] == [s.name for s in STEPS]
    plugin_step = next(s for s in steps if s.name == PLUGINS_STEP)
    result = plugin_step.apply(MagicMock())
    assert result.status is StepStatus.INFO
    assert select_steps(with_plugins=True) == STEPS


def test_full_run(ctx: ProjectContext, no_cordova) -> None:
    """Test a complete run writes every artifact and succeeds."""
    result = run_pipeline(ctx)

    assert result.ok
    assert result.exit_code == 0
    assert CSP_META in ctx.index_html.read_text(encoding="utf-8")
    assert ctx.launcher_html.exists()
    assert ctx.config_xml.exists()
    assert ctx.network_security_xml.exists()
    assert (ctx.resources_dir / "android" / "splash-icon.png").exists()
    assert all(r.status is not StepStatus.FATAL for r in result.results)


def test_second_run_is_byte_identical(ctx: ProjectContext, no_cordova) -> None:
    """Test rerunning produces exactly the same project."""
    run_pipeline(ctx)
    first = {
        p: p.read_bytes() for p in sorted(ctx.root.rglob("*")) if p.is_file()
    }

    run_pipeline(ctx)
    second = {
        p: p.read_bytes() for p in sorted(ctx.root.rglob("*")) if p.is_file()
    }

    assert second == first


def test_missing_www_stops_before_mutation(tmp_path: Path, no_cordova) -> None:
    """Test nothing is written when www/ is absent."""
    ctx = ProjectContext.from_root(tmp_path)

    result = run_pipeline(ctx)

    assert not result.ok
    assert result.exit_code == 1
    assert "www" in (result.error or "")
    assert result.results[-1].status is StepStatus.FATAL
    assert not ctx.resources_dir.exists()
    assert not ctx.config_xml.exists()
    assert not ctx.network_security_xml.exists()
    assert list(tmp_path.iterdir()) == []


def test_missing_index_runs_no_step(tmp_path: Path) -> None:
    """Test the gate precedes every step, including plugin installation."""
    (tmp_path / "www").mkdir()
    ctx = ProjectContext.from_root(tmp_path)
    step = MagicMock()

    result = run_pipeline(
        ctx, [MutationStep("gated", Idempotency.ALWAYS_OVERWRITE, step)]
    )

    assert not result.ok
    step.assert_not_called()


def test_unreadable_index_aborts(ctx: ProjectContext, no_cordova) -> None:
    """Test a fatal error inside a step stops the remaining steps."""
    ctx.index_html.write_bytes(b"\xff\xfe broken")

    result = run_pipeline(ctx)

    assert not result.ok
    assert not ctx.launcher_html.exists()
    assert not ctx.config_xml.exists()


@pytest.mark.parametrize("returncode", [0, 1])
def test_plugin_outcome_never_fails_run(ctx: ProjectContext, returncode: int) -> None:
    """Test success and failure of plugin commands both end in success."""
    with (
        patch("arise_setup.plugins.base.shutil.which", side_effect=lambda n: n),
        patch("arise_setup.plugins.installer.subprocess") as mock_subprocess,
    ):
        mock_subprocess.run.return_value = MagicMock(returncode=returncode)
        result = run_pipeline(ctx)

    assert result.ok
    assert result.exit_code == 0


def test_step_with_multiple_results(ctx: ProjectContext) -> None:
    """Test a step returning a list reports every line."""
    lines = [StepResult.ok("one"), StepResult.info("two")]
    step = MutationStep("multi", Idempotency.EXTERNAL, lambda _ctx: lines)

    result = run_pipeline(ctx, [step])

    assert list(result.results) == lines


def test_output_has_glyphs_and_next_steps(
    ctx: ProjectContext, no_cordova, capsys
) -> None:
    """Test status glyphs and the next-steps guide are printed."""
    run_pipeline(ProjectContext.from_root(ctx.root, entry="start.html"))

    out = capsys.readouterr().out
    assert "✔ Injected CSP meta into www/index.html" in out
    assert "→ Skipping (maybe installed): cordova-plugin-httpd" in out
    assert "www/web/start.html" in out
    assert "cordova build android" in out


def test_fatal_line_goes_to_stderr(tmp_path: Path, capsys) -> None:
    """Test the fatal line is written to stderr and the banner to stdout."""
    run_pipeline(ProjectContext.from_root(tmp_path))

    captured = capsys.readouterr()
    assert "✖ Missing www folder" in captured.err
    assert "✖" not in captured.out
    assert "Project:" in captured.out
