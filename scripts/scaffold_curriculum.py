#!/usr/bin/env python3
"""
Command-line interface for scaffolding and auditing the curriculum tree.

Subcommands:
- generate: Write HANDS-ON-EXERCISES.md into each catalog problem's directory
- list: Show the catalog and which problem directories exist
- audit: Score every problem directory for completeness
"""

import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

from curriculum.contexts.auditing import audit_curriculum, render_audit_report
from curriculum.contexts.auditing.auditor import DEFAULT_TOTAL_PROBLEMS, MAX_SCORE
from curriculum.contexts.auditing.logger import setup_auditing_logger
from curriculum.contexts.scaffolding import (
    DEFAULT_CATALOG,
    CatalogError,
    TemplateRenderError,
    generate_documents,
    load_catalog,
    load_document_template,
)
from curriculum.contexts.scaffolding.catalog import describe_range
from curriculum.contexts.scaffolding.defaults import DEFAULT_OUTPUT_FILENAME, DEFAULT_TEMPLATE_NAME
from curriculum.contexts.scaffolding.logger import setup_scaffolding_logger
from curriculum.utils.timestamp import now

load_dotenv()
SOLUTIONS_PATH = Path(os.getenv("CURRICULUM_SOLUTIONS_PATH", "Solutions"))
CATALOG_PATH = os.getenv("CURRICULUM_CATALOG_PATH")
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

GRADE_COLORS = {
    "EXCELLENT": typer.colors.GREEN,
    "GOOD": typer.colors.YELLOW,
    "NEEDS IMPROVEMENT": typer.colors.RED,
}

app = typer.Typer(
    add_completion=False,
    help="Scaffold and audit the Terraform curriculum problem directories",
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _resolve_catalog(catalog_path: Optional[Path]):
    """Load the catalog from a YAML file, falling back to the built-in one."""
    if catalog_path is None and CATALOG_PATH:
        catalog_path = Path(CATALOG_PATH)

    if catalog_path is None:
        return DEFAULT_CATALOG

    try:
        return load_catalog(catalog_path)
    except (CatalogError, OSError) as e:
        typer.secho(f"Invalid catalog {catalog_path}: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


def _require_solutions_path(solutions_path: Path) -> None:
    if not solutions_path.is_dir():
        typer.secho(
            f"Solutions directory not found: {solutions_path}", fg=typer.colors.RED, err=True
        )
        raise typer.Exit(code=1)


@app.command("generate")
def generate_command(
    solutions_path: Path = typer.Option(
        SOLUTIONS_PATH, "--solutions-path", "-s", help="Directory holding the problem directories"
    ),
    catalog_path: Optional[Path] = typer.Option(
        None, "--catalog", "-c", help="YAML catalog (default: built-in Problems 11-20)"
    ),
    template_name: str = typer.Option(
        DEFAULT_TEMPLATE_NAME, "--template", "-t", help="Document template name"
    ),
    output_name: str = typer.Option(
        DEFAULT_OUTPUT_FILENAME, "--output-name", "-o", help="Filename written per problem"
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", "-n", help="Show what would be written without making changes"
    ),
):
    """
    Generate hands-on exercise documents for every catalog problem.

    Problems whose directory doesn't exist yet are skipped. Existing output
    files are overwritten.

    Examples:\n

        $ scaffold_curriculum.py generate --dry-run

        $ scaffold_curriculum.py generate -s Terraform/Solutions -c problems_21_30.yaml
    """
    _require_solutions_path(solutions_path)
    catalog = _resolve_catalog(catalog_path)

    try:
        template = load_document_template(template_name)
    except TemplateRenderError as e:
        typer.secho(str(e), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    log_dir = LOGS_PATH / f"generate_{now()}"
    setup_scaffolding_logger(log_dir, solutions_path, dry_run=dry_run)

    if dry_run:
        typer.echo("Running in DRY RUN mode (no changes will be made)\n")

    result = generate_documents(
        catalog, template, solutions_path, filename=output_name, dry_run=dry_run
    )

    failures = {entry: error for entry, error in result.failed}
    for entry in catalog:
        if entry in result.skipped:
            typer.echo(f"⊘ Problem {entry.identifier}: {entry.directory_name} not found, skipping")
        elif entry in failures:
            typer.secho(f"✗ Problem {entry.identifier}: {failures[entry]}", fg=typer.colors.RED)
        elif dry_run:
            typer.echo(f"• Would create exercises for Problem {entry.identifier}: {entry.title}")
        else:
            typer.echo(f"📝 Created exercises for Problem {entry.identifier}: {entry.title}")

    typer.echo("\n" + "=" * 80)
    typer.echo("Summary:")
    typer.echo(f"  Written: {len(result.written)}")
    typer.echo(f"  Skipped: {len(result.skipped)}")
    if result.failed:
        typer.secho(f"  Errors:  {len(result.failed)}", fg=typer.colors.RED)
        raise typer.Exit(code=1)

    if dry_run:
        typer.echo("\nDry run complete. Run without --dry-run to make changes.")
    else:
        typer.secho(
            f"\n✅ Hands-on exercises created for Problems {describe_range(catalog)}!",
            fg=typer.colors.GREEN,
        )


@app.command("list")
def list_command(
    solutions_path: Path = typer.Option(
        SOLUTIONS_PATH, "--solutions-path", "-s", help="Directory holding the problem directories"
    ),
    catalog_path: Optional[Path] = typer.Option(
        None, "--catalog", "-c", help="YAML catalog (default: built-in Problems 11-20)"
    ),
):
    """
    List catalog problems and whether their directories exist.

    Example:\n

        $ scaffold_curriculum.py list
    """
    catalog = _resolve_catalog(catalog_path)

    typer.secho(f"\n{len(catalog)} problem(s) in catalog", fg=typer.colors.BLUE, bold=True)
    for entry in catalog:
        if (solutions_path / entry.directory_name).is_dir():
            typer.secho(f"✓ {entry.directory_name}", fg=typer.colors.GREEN)
        else:
            typer.secho(f"✗ {entry.directory_name} (missing)", fg=typer.colors.YELLOW)
        typer.echo(f"    {entry.focus}")


@app.command("audit")
def audit_command(
    solutions_path: Path = typer.Option(
        SOLUTIONS_PATH, "--solutions-path", "-s", help="Directory holding the problem directories"
    ),
    total_problems: int = typer.Option(
        DEFAULT_TOTAL_PROBLEMS, "--total", help="Number of problems the curriculum should have"
    ),
    report_path: Optional[Path] = typer.Option(
        None, "--report", "-r", help="Write a markdown report to this path"
    ),
    strict: bool = typer.Option(
        False, "--strict", help="Exit with code 1 unless every problem is EXCELLENT"
    ),
):
    """
    Score every problem directory for completeness.

    Examples:\n

        $ scaffold_curriculum.py audit

        $ scaffold_curriculum.py audit --report outs/curriculum_report.md --strict
    """
    _require_solutions_path(solutions_path)

    log_dir = LOGS_PATH / f"audit_{now()}"
    setup_auditing_logger(log_dir, solutions_path)

    audit = audit_curriculum(solutions_path, total_problems=total_problems)

    typer.secho("\n📈 CURRICULUM QUALITY REPORT", fg=typer.colors.BLUE, bold=True)
    typer.echo("=" * 80)
    for problem in audit.problems:
        typer.secho(
            f"  {problem.name}: {problem.percentage}% ({problem.score}/{MAX_SCORE}) - {problem.grade}",
            fg=GRADE_COLORS[problem.grade],
        )
        typer.echo(f"     Files: {problem.file_count}, Lines: {problem.line_count}")

    typer.echo("\n" + "=" * 80)
    typer.echo(f"Total Problems: {audit.total_problems}")
    typer.echo(f"Validated Problems (≥80%): {audit.validated}")
    typer.echo(f"Success Rate: {audit.success_rate}%")
    typer.echo(f"Total Files: {audit.total_files}")
    typer.echo(f"Total Lines of Code/Documentation: {audit.total_lines}")

    typer.secho("\n📊 QUALITY BREAKDOWN BY RANGE", fg=typer.colors.BLUE, bold=True)
    for level in audit.range_breakdown:
        typer.echo(
            f"{level.name} (Problems {level.start}-{level.end}): "
            f"{level.file_count} files, {level.line_count} lines"
        )

    readiness = audit.readiness
    typer.secho("\n🏢 ENTERPRISE READINESS ASSESSMENT", fg=typer.colors.BLUE, bold=True)
    for check in readiness.checks:
        if check.passed:
            typer.secho(f"✅ {check.describe()}", fg=typer.colors.GREEN)
        else:
            typer.secho(f"⚠️  {check.describe()}", fg=typer.colors.YELLOW)
    typer.echo(
        f"\n🎯 ENTERPRISE READINESS SCORE: {readiness.score}% "
        f"({readiness.features}/{len(readiness.checks)})"
    )
    typer.echo(f"ENTERPRISE GRADE: {readiness.grade}")

    if audit.missing:
        typer.secho(f"\nMissing components ({len(audit.missing)}):", fg=typer.colors.YELLOW)
        for item in audit.missing:
            typer.echo(f"  - {item}")

    typer.echo(f"\nOverall Success Rate: {audit.success_rate}%")
    typer.echo(f"Enterprise Readiness: {readiness.score}%")
    if audit.world_class:
        typer.secho("🏆 WORLD-CLASS CURRICULUM ACHIEVED!", fg=typer.colors.GREEN, bold=True)
    else:
        typer.secho("⚠️  CURRICULUM NEEDS ENHANCEMENT", fg=typer.colors.YELLOW)

    if report_path is not None:
        report_path.parent.mkdir(parents=True, exist_ok=True)
        report_path.write_text(render_audit_report(audit), encoding="utf-8")
        typer.echo(f"\nReport written to {report_path}")

    if strict and audit.validated < audit.total_problems:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
