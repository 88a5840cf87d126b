"""
CPU backend for best-subset search.

CPUSearchBackend fans out one search_size() task per subset size through a
concurrent.futures executor, waits for every task, and merges the per-size
winners into a single Result[SearchParams].
"""

from __future__ import annotations

from concurrent.futures import Executor, ProcessPoolExecutor, ThreadPoolExecutor
from typing import Any, Literal
import logging
import os

from bestsubset.core.result import Result
from bestsubset.core.compute.timing import Timer
from bestsubset.core.exceptions import InvalidConfigurationError
from bestsubset.selection._common import SizeResult, SearchParams, improves
from bestsubset.selection._worker import search_size
from bestsubset.selection.design import SearchDesign

logger = logging.getLogger(__name__)

ExecutorKind = Literal['process', 'thread', 'sequential']
EXECUTOR_KINDS: tuple[str, ...] = ('process', 'thread', 'sequential')


def select_best(per_size: tuple[SizeResult, ...] | list[SizeResult]) -> SizeResult:
    """
    Minimum-AIC entry, scanning in the given (ascending size) order.

    Near-equal scores keep the earliest entry, so ties resolve to the
    smallest size.
    """
    if not per_size:
        raise ValueError("select_best() requires at least one per-size result")
    best = per_size[0]
    for candidate in per_size[1:]:
        if improves(candidate.aic, best.aic):
            best = candidate
    return best


class CPUSearchBackend:
    """
    CPU backend running one worker per subset size.

    Implements the Backend protocol for SearchDesign -> SearchParams.

    Args:
        executor: 'process' (default, one process per size up to the worker
            limit), 'thread', or 'sequential' (in the calling thread)
        max_workers: Upper bound on concurrent workers; defaults to the CPU
            count. Never more workers than sizes.
    """

    def __init__(
        self,
        executor: ExecutorKind = 'process',
        max_workers: int | None = None,
    ):
        if executor not in EXECUTOR_KINDS:
            raise InvalidConfigurationError(
                f"executor: must be one of {list(EXECUTOR_KINDS)}, got {executor!r}",
                option='executor',
                value=executor,
            )
        if max_workers is not None and (
            isinstance(max_workers, bool)
            or not isinstance(max_workers, int)
            or max_workers < 1
        ):
            raise InvalidConfigurationError(
                f"max_workers: must be a positive integer, got {max_workers!r}",
                option='max_workers',
                value=max_workers,
            )
        self.executor = executor
        self.max_workers = max_workers

    @property
    def name(self) -> str:
        return f'cpu_{self.executor}'

    def resolve_workers(self, n_tasks: int) -> int:
        """Number of workers for n_tasks tasks."""
        if self.executor == 'sequential' or n_tasks <= 1:
            return 1
        cpu = os.cpu_count() or 1
        if self.max_workers is None:
            return min(cpu, n_tasks)
        return max(1, min(self.max_workers, n_tasks))

    def solve(self, design: SearchDesign) -> Result[SearchParams]:
        """
        Run the search.

        Args:
            design: Validated search design

        Returns:
            Result containing SearchParams with one SizeResult per size
        """
        timer = Timer()
        timer.start()

        sizes = list(design.sizes)
        workers = self.resolve_workers(len(sizes))
        logger.info(
            "searching sizes %d..%d over %d explanatory columns "
            "(%d rows, executor=%s, workers=%d)",
            design.min_subset_size, design.max_subset_size,
            design.n_explanatory, design.n, self.executor, workers,
        )

        with timer.section('search'):
            if workers == 1:
                per_size = self._run_sequential(design, sizes)
            else:
                per_size = self._run_parallel(design, sizes, workers)

        with timer.section('aggregate'):
            best = select_best(per_size)

        timer.stop()

        warnings_list = [
            f"size {r.size}: no valid model, all {r.n_singular} subsets singular"
            for r in per_size if not r.is_valid
        ]
        n_models = sum(r.n_evaluated for r in per_size)
        n_singular = sum(r.n_singular for r in per_size)
        logger.info(
            "search finished: %d models fitted, %d singular subsets skipped, "
            "best size %d (AIC %.4f)",
            n_models, n_singular, best.size, best.aic,
        )

        params = SearchParams(per_size=tuple(per_size), best=best)
        info: dict[str, Any] = {
            'method': 'exhaustive_ols_aic',
            'n_observations': design.n,
            'n_explanatory': design.n_explanatory,
            'min_subset_size': design.min_subset_size,
            'max_subset_size': design.max_subset_size,
            'n_models': n_models,
            'n_singular': n_singular,
            'executor': self.executor,
            'workers': workers,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )

    def _make_executor(self, workers: int) -> Executor:
        if self.executor == 'thread':
            return ThreadPoolExecutor(max_workers=workers)
        return ProcessPoolExecutor(max_workers=workers)

    def _run_sequential(self, design: SearchDesign, sizes: list[int]) -> list[SizeResult]:
        per_size = []
        for size in sizes:
            per_size.append(search_size(design.X, design.y, size, tol=design.tol))
            logger.info("size %d done", size)
        return per_size

    def _run_parallel(
        self,
        design: SearchDesign,
        sizes: list[int],
        workers: int,
    ) -> list[SizeResult]:
        with self._make_executor(workers) as pool:
            # Futures stay in size order; results are read only after all complete
            futures = [
                pool.submit(search_size, design.X, design.y, size, tol=design.tol)
                for size in sizes
            ]
            per_size = [future.result() for future in futures]
        for result in per_size:
            logger.info("size %d done", result.size)
        return per_size
