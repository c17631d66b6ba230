#!/usr/bin/env python3
"""
Resume Keyword Checker CLI.

Scores resumes against a job description by keyword overlap and lists
the job keywords the resume is missing.

Usage:
    python main.py check RESUME --job JOB_FILE   # Score a resume
    python main.py keywords FILE                 # Show extracted keywords
    python main.py history                       # Show recent checks
    python main.py serve                         # Start the API server
"""

import sys
from pathlib import Path

import click
from tqdm import tqdm

from src import __version__
from src.config import get_settings
from src.logging_config import configure_logging


def _load_job_text(job_file: str, text: str) -> str:
    """Return job description text from --job or --text, or exit."""
    from src.data_extraction import read_job_description

    if job_file and text is not None:
        click.echo("Error: Provide only one of --job or --text", err=True)
        sys.exit(1)
    if job_file:
        return read_job_description(job_file)
    if text is not None:
        return text

    click.echo("Error: Provide either --job or --text", err=True)
    sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="Resume Keyword Checker")
@click.option("--verbose", is_flag=True, default=False, help="Enable debug logging")
def cli(verbose: bool):
    """
    Resume Keyword Checker - see which job keywords your resume is missing.
    """
    configure_logging("DEBUG" if verbose else get_settings().log_level)


@cli.command()
@click.argument("resumes", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--job",
    "-j",
    "job_file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to job description text file",
)
@click.option(
    "--text",
    "-t",
    type=str,
    default=None,
    help="Job description text (alternative to file)",
)
@click.option("--title", type=str, default=None, help="Job title stored with the check")
@click.option(
    "--save/--no-save",
    default=False,
    help="Store results in the check history",
)
@click.option(
    "--all-missing",
    is_flag=True,
    default=False,
    help="Show every missing keyword instead of the first few",
)
def check(resumes: tuple[str, ...], job_file: str, text: str, title: str, save: bool, all_missing: bool):
    """
    Score one or more resumes against a job description.

    Example:
        python main.py check resume.pdf --job vacancies/acme.txt
        python main.py check cv.txt --text "Senior Python engineer with AWS..."
    """
    from backend.services import ResumeCheckService
    from src.data_extraction import read_document
    from src.errors import ResumeCheckError, ValidationError

    job_text = _load_job_text(job_file, text)
    service = ResumeCheckService()
    preview = get_settings().missing_keywords_preview

    results = []
    failed = False

    for resume in tqdm(resumes, desc="Checking", disable=len(resumes) < 2):
        resume_path = Path(resume)
        try:
            resume_text = read_document(resume_path)
            result = service.analyze_text(
                resume_text,
                job_text,
                file_name=resume_path.name,
                job_title=title,
                save=save,
            )
        except ResumeCheckError as e:
            click.echo(f"✗ {resume_path.name}: {e.user_message}", err=True)
            failed = True
            # * An unusable job description fails every resume the same way
            if isinstance(e, ValidationError):
                sys.exit(1)
            continue

        results.append(result)

    for result in results:
        click.echo()
        click.echo("═" * 50)
        click.echo(f"  {result.file_name}: {result.score}% match")
        click.echo("═" * 50)

        missing = result.missing_keywords
        if not missing:
            click.echo("  No missing keywords.")
            continue

        shown = missing if all_missing else missing[:preview]
        click.echo(f"  Missing Keywords ({len(missing)}):")
        click.echo(f"    {', '.join(shown)}")
        if len(missing) > len(shown):
            click.echo(f"    ... and {len(missing) - len(shown)} more")

        if result.check_id:
            click.echo(f"  Saved as: {result.check_id}")

    if failed:
        sys.exit(1)


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False), required=False)
@click.option(
    "--text",
    "-t",
    type=str,
    default=None,
    help="Text to extract keywords from (alternative to file)",
)
def keywords(file: str, text: str):
    """
    Show the keywords extracted from a resume or job description.
    """
    from src.data_extraction import read_document
    from src.errors import ResumeCheckError
    from src.keyword_engine import extract_keywords

    if file:
        try:
            content = read_document(file)
        except ResumeCheckError as e:
            click.echo(f"Error: {e.user_message}", err=True)
            sys.exit(1)
    elif text is not None:
        content = text
    else:
        click.echo("Error: Provide either FILE or --text", err=True)
        sys.exit(1)

    found = extract_keywords(content)

    if not found:
        click.echo("No keywords found.")
        return

    click.echo(f"Keywords ({len(found)}):")
    click.echo(f"  {', '.join(found)}")


@cli.command()
@click.option(
    "--limit",
    "-n",
    type=click.IntRange(1, 100),
    default=None,
    help="Number of checks to show",
)
def history(limit: int):
    """
    Show recent resume checks, newest first.
    """
    from backend.services import ResumeCheckService

    checks = ResumeCheckService().list_checks(limit)

    if not checks:
        click.echo("No scans yet.")
        return

    for item in checks:
        when = item.created_at.strftime("%Y-%m-%d %H:%M") if item.created_at else "-"
        click.echo(f"{item.score:>3}%  {when}  {item.job_title}  ({item.file_name or 'unknown file'})")
        if item.missing_keywords:
            click.echo(f"      missing: {', '.join(item.missing_keywords)}")


@cli.command()
@click.option(
    "--host",
    "-h",
    default="127.0.0.1",
    help="Host to bind to",
)
@click.option(
    "--port",
    "-p",
    default=8000,
    help="Port to bind to",
)
@click.option(
    "--reload/--no-reload",
    default=False,
    help="Enable auto-reload for development",
)
def serve(host: str, port: int, reload: bool):
    """
    Start the API server.

    Example:
        python main.py serve
        python main.py serve --port 8080
    """
    click.echo(f"Starting Resume Checker API on http://{host}:{port}")
    click.echo("Press Ctrl+C to stop")
    click.echo()

    try:
        import uvicorn
        uvicorn.run(
            "backend.api:app",
            host=host,
            port=port,
            reload=reload,
        )
    except ImportError:
        click.echo("Error: uvicorn not installed. Run: pip install uvicorn", err=True)
        sys.exit(1)


if __name__ == "__main__":
    cli()
