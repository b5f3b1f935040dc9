"""Benchmark the child lookup strategies of the string trie."""

import argparse
import gc
import json
import random
import string
import time
import tracemalloc
from pathlib import Path
from typing import Optional

import matplotlib.pyplot as plt
import psutil

from src.string_trie.children import CHILD_LOOKUP_STRATEGIES
from src.string_trie.config import load_config_file
from src.string_trie.logger import setup_logging, stop_logging
from src.string_trie.trie import StringTrie

DATA_SIZES = [1000, 10000, 50000, 100000]
RESULTS_DIR = (
    Path(__file__).parent.parent / "static" / "benchmarks" / "child_lookup"
)
OPERATIONS = ["add", "contains", "remove"]


def generate_keys(
    count: int,
    alphabet: str = string.ascii_letters + string.digits,
    min_length: int = 3,
    max_length: int = 12,
    seed: Optional[int] = None,
) -> list[str]:
    """Generate random keys to load into the trie.

    Args:
        count (int): Number of keys to generate.
        alphabet (str): Characters the keys are made of. A wide alphabet
            gives the nodes close to the root a high fan-out.
        min_length (int): Shortest key length.
        max_length (int): Longest key length.
        seed (Optional[int]): Seed for reproducible runs.

    Returns:
        list[str]: The generated keys, duplicates included.

    """
    rng = random.Random(seed)
    return [
        "".join(
            rng.choice(alphabet)
            for _ in range(rng.randint(min_length, max_length))
        )
        for _ in range(count)
    ]


def benchmark_strategy(
    child_lookup: str,
    keys: list[str],
    log_details: bool = False,
) -> dict[str, float]:
    """Time every trie operation over `keys` for one strategy.

    Args:
        child_lookup (str): The child lookup strategy to benchmark.
        keys (list[str]): The keys to add, look up and remove.
        log_details (bool): Whether the trie logs every operation.

    Returns:
        dict[str, float]: Average time per call in microseconds for each
        operation, plus the traced peak memory and the RSS growth in
        bytes.

    """
    process = psutil.Process()
    gc.collect()
    rss_before = process.memory_info().rss
    tracemalloc.start()

    trie = StringTrie(child_lookup, log_details)
    results: dict[str, float] = {}
    for operation in OPERATIONS:
        method = getattr(trie, operation)
        start_time = time.perf_counter()
        for key in keys:
            method(key)
        elapsed = time.perf_counter() - start_time
        results[operation] = elapsed / len(keys) * 1_000_000
        if operation == "add":
            results["nodes"] = trie.count_nodes()
            results["memory_peak"] = tracemalloc.get_traced_memory()[1]
            results["rss_growth"] = process.memory_info().rss - rss_before

    tracemalloc.stop()
    trie.check_invariants()
    del trie
    gc.collect()
    return results


def plot_results(
    results: dict[str, dict[str, dict[str, float]]],
    output_dir: Path,
) -> Path:
    """Plot the average time per operation for every strategy.

    Args:
        results (dict): Results keyed by data size, then strategy.
        output_dir (Path): Where the graph is saved.

    Returns:
        Path: The path of the saved graph.

    """
    sizes = list(results)
    figure, axes = plt.subplots(1, len(OPERATIONS), figsize=(15, 5))
    try:
        for axis, operation in zip(axes, OPERATIONS):
            for child_lookup in CHILD_LOOKUP_STRATEGIES:
                axis.plot(
                    sizes,
                    [results[size][child_lookup][operation] for size in sizes],
                    marker="o",
                    label=child_lookup,
                )
            axis.set_title(f"{operation}()")
            axis.set_xlabel("Keys")
            axis.set_ylabel("Time per call (us)")
            axis.legend()

        figure.tight_layout()
        output_dir.mkdir(parents=True, exist_ok=True)
        graph_path = output_dir / "benchmark_child_lookup.png"
        figure.savefig(graph_path)
        return graph_path
    finally:
        # Cleanup matplotlib resources
        plt.close("all")


def main() -> None:
    """Main function."""
    parser = argparse.ArgumentParser(
        description="Benchmark the trie child lookup strategies.",
    )
    parser.add_argument(
        "--sizes",
        type=int,
        nargs="+",
        default=DATA_SIZES,
        help="Number of keys for each benchmark round.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed used to generate the keys.",
    )
    parser.add_argument(
        "--config_path",
        type=str,
        default=None,
        help="Optional path to a trie config file enabling detailed logs.",
        required=False,
    )
    parser.add_argument(
        "--output",
        type=str,
        default=str(RESULTS_DIR),
        help="Directory for the results JSON file and the graph.",
    )
    args = parser.parse_args()

    log_details = False
    if args.config_path is not None:
        config = load_config_file(Path(args.config_path))
        log_details = config.log_details
        if log_details:
            setup_logging(config.log_file)

    output_dir = Path(args.output)
    results: dict[str, dict[str, dict[str, float]]] = {}
    try:
        for size in args.sizes:
            keys = generate_keys(size, seed=args.seed)
            results[str(size)] = {}
            for child_lookup in CHILD_LOOKUP_STRATEGIES:
                print(f"\n--- Benchmarking '{child_lookup}' with {size} keys ---")
                round_results = benchmark_strategy(child_lookup, keys, log_details)
                results[str(size)][child_lookup] = round_results
                for operation in OPERATIONS:
                    print(f"{operation}: {round_results[operation]:.3f} us/call")
                print(f"Peak traced memory: {round_results['memory_peak']:.0f} bytes")
    finally:
        stop_logging()

    output_dir.mkdir(parents=True, exist_ok=True)
    results_json_path = output_dir / "results.json"
    with open(results_json_path, "w", encoding="utf-8") as f:
        json.dump(results, f, indent=4)

    graph_path = plot_results(results, output_dir)
    print(f"\nResults written to {results_json_path} and {graph_path}")


if __name__ == "__main__":
    main()
