"""
Command line front-end.

    bestsubset housing.csv --min-size 4 -v

Reads a table (CSV/TSV with a header row, or NPY), runs the search and
prints the per-size report. Fatal input or configuration problems print a
one-line diagnostic to stderr and exit with status 1.
"""

from pathlib import Path
from typing import Optional
import logging

import typer

from bestsubset.core._logging_utils import configure_logging
from bestsubset.core.datasource import DataSource
from bestsubset.core.exceptions import BestSubsetError
from bestsubset.selection import search, DEFAULT_MIN_SUBSET_SIZE

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Exhaustive best-subset linear regression scored by AIC.",
    add_completion=False,
)


@app.command()
def run(
    path: Path = typer.Argument(..., help="Input table: .csv, .tsv or .npy"),
    min_size: int = typer.Option(
        DEFAULT_MIN_SUBSET_SIZE, "--min-size", help="Smallest subset size searched"
    ),
    max_size: Optional[int] = typer.Option(
        None, "--max-size", help="Largest subset size searched (default: all columns)"
    ),
    response: Optional[str] = typer.Option(
        None, "--response", help="Response column name (default: last column)"
    ),
    executor: str = typer.Option(
        "process", "--executor", help="process, thread or sequential"
    ),
    workers: Optional[int] = typer.Option(
        None, "--workers", help="Maximum concurrent workers (default: CPU count)"
    ),
    decimals: int = typer.Option(4, "--decimals", help="Decimal places in the report"),
    verbose: int = typer.Option(0, "--verbose", "-v", count=True, help="-v info, -vv debug"),
):
    """
    Search every subset of explanatory columns and report the best per size.
    """
    configure_logging(verbose)

    try:
        source = DataSource.from_file(path)
        logger.info("loaded %s: %d rows, columns %s",
                    path, source.n_observations, list(source.columns))
        solution = search(
            source,
            response=response,
            min_subset_size=min_size,
            max_subset_size=max_size,
            executor=executor,
            max_workers=workers,
        )
    except BestSubsetError as e:
        typer.echo(f"error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(solution.summary(decimals=decimals))


def main() -> None:
    app(prog_name="bestsubset")
