# pqueues/benchmark.py
"""
Timing runs for the priority-queue backends.

For every size in the configuration, each backend is filled with the same
random records and then drained, and the same records are sorted with
pq_sort. Phase times, final capacity and drain-order checks are collected
as BenchmarkResult rows and written to JSON.

Entry point: `python -m pqueues.benchmark`
"""
from __future__ import annotations

import json
import logging
import traceback as tb
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from time import perf_counter
from typing import Any, Dict, List, Optional

import numpy as np
from tqdm import tqdm

from .core.base import QueueFactory
from .core.heap_queue import HeapPriorityQueue
from .core.pq_sort import pq_sort
from .core.sorted_array_queue import SortedArrayPriorityQueue
from .core.types import Record

logger = logging.getLogger(__name__)

BACKENDS: Dict[str, QueueFactory] = {
    "sorted_array": SortedArrayPriorityQueue,
    "heap": HeapPriorityQueue,
}


class RunStatus(str, Enum):
    OK = "ok"
    EXCEPTION = "exception"


@dataclass
class BenchmarkConfig:
    """Parámetros de la batería de tiempos."""
    sizes: List[int] = field(default_factory=lambda: [10_000, 20_000, 30_000, 40_000])
    backends: List[str] = field(default_factory=lambda: list(BACKENDS))
    seed: int = 106
    low: int = -10_000          # rango de prioridades aleatorias
    high: int = 10_000
    out_dir: Path = Path("benchmark_results")


@dataclass
class BenchmarkResult:
    """Resultado de una ejecución (backend, operación, tamaño)."""
    backend: str
    operation: str
    n: int
    status: RunStatus

    start_time: str
    fill_sec: Optional[float] = None
    drain_sec: Optional[float] = None
    total_sec: Optional[float] = None
    final_capacity: Optional[int] = None
    order_ok: Optional[bool] = None

    exception_type: Optional[str] = None
    exception_message: Optional[str] = None
    exception_traceback: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serializable a JSON fácilmente."""
        data = asdict(self)
        data["status"] = self.status.value
        return data


def random_records(n: int, rng: np.random.Generator, low: int = -10_000, high: int = 10_000) -> List[Record]:
    """n unlabeled records with integer priorities drawn from [low, high]."""
    priorities = rng.integers(low, high, size=n, endpoint=True)
    return [Record("", int(p)) for p in priorities]


def _is_non_increasing(records: List[Record]) -> bool:
    return all(a.priority >= b.priority for a, b in zip(records, records[1:]))


def _run(backend: str, operation: str, n: int, body) -> BenchmarkResult:
    """Run `body(result)` and package timings or the exception it raised."""
    start_dt = datetime.now(timezone.utc)
    result = BenchmarkResult(
        backend=backend,
        operation=operation,
        n=n,
        status=RunStatus.OK,
        start_time=start_dt.isoformat(),
    )
    start_perf = perf_counter()
    try:
        body(result)
    except Exception as exc:  # noqa: BLE001
        result.status = RunStatus.EXCEPTION
        result.exception_type = type(exc).__name__
        result.exception_message = str(exc)
        result.exception_traceback = tb.format_exc()
        logger.exception("[%s] %s failed for n=%d", backend, operation, n)
    result.total_sec = perf_counter() - start_perf

    logger.info(
        "[%s] %s n=%d status=%s, total=%.3fs",
        backend,
        operation,
        n,
        result.status.value,
        result.total_sec,
    )
    return result


def time_fill_drain(backend: str, factory: QueueFactory, records: List[Record]) -> BenchmarkResult:
    """Enqueue every record, validate once, then dequeue them all."""

    def body(result: BenchmarkResult) -> None:
        pq = factory()
        t0 = perf_counter()
        for record in records:
            pq.enqueue(record)
        result.fill_sec = perf_counter() - t0
        result.final_capacity = pq.capacity

        pq.validate_internal_state()

        t0 = perf_counter()
        drained = [pq.dequeue() for _ in range(len(records))]
        result.drain_sec = perf_counter() - t0
        result.order_ok = pq.is_empty() and _is_non_increasing(drained)

    return _run(backend, "fill_drain", len(records), body)


def time_pq_sort(backend: str, factory: QueueFactory, records: List[Record]) -> BenchmarkResult:
    """Sort a copy of `records` descending through the given backend."""

    def body(result: BenchmarkResult) -> None:
        data = list(records)
        pq_sort(data, queue_factory=factory, descending=True)
        result.order_ok = _is_non_increasing(data)

    return _run(backend, "pq_sort", len(records), body)


def run_benchmarks(config: BenchmarkConfig) -> List[BenchmarkResult]:
    unknown = [name for name in config.backends if name not in BACKENDS]
    if unknown:
        raise ValueError(f"Unknown backends: {unknown}")

    rng = np.random.default_rng(config.seed)
    results: List[BenchmarkResult] = []

    for n in tqdm(config.sizes, desc="sizes"):
        # Mismos registros para todos los backends de este tamaño
        records = random_records(n, rng, config.low, config.high)
        for name in config.backends:
            factory = BACKENDS[name]
            results.append(time_fill_drain(name, factory, records))
            results.append(time_pq_sort(name, factory, records))

    return results


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    config = BenchmarkConfig()
    config.out_dir.mkdir(parents=True, exist_ok=True)

    results = run_benchmarks(config)

    results_path = config.out_dir / "benchmark_results.json"
    with results_path.open("w", encoding="utf-8") as f:
        json.dump([r.to_dict() for r in results], f, indent=2)

    failed = sum(1 for r in results if r.status != RunStatus.OK or not r.order_ok)
    logger.info("Saved %d results to %s (%d with problems)", len(results), results_path.resolve(), failed)


if __name__ == "__main__":
    main()
