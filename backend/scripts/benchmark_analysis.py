from __future__ import annotations

import argparse
import json
import statistics
import time
from collections import Counter
from pathlib import Path

from morphokey.core.config import load_settings
from morphokey.nlp.japanese import load_japanese_tokenizer
from morphokey.services.prediction import all_candidates, build_corpus_index, generate_candidates


def run_benchmark(text: str, iterations: int, warmup: int) -> dict[str, object]:
    settings = load_settings()
    tokenizer = load_japanese_tokenizer(settings)

    for _ in range(warmup):
        generate_candidates(build_corpus_index(tokenizer.tokenize(text)))

    tokenize_ms: list[float] = []
    model_ms: list[float] = []
    for _ in range(iterations):
        started = time.perf_counter()
        tokens = tokenizer.tokenize(text)
        tokenized = time.perf_counter()
        index = build_corpus_index(tokens)
        result = generate_candidates(index)
        finished = time.perf_counter()
        tokenize_ms.append((tokenized - started) * 1000.0)
        model_ms.append((finished - tokenized) * 1000.0)

    pos_counter: Counter[str] = Counter(index.pos_by_word.values())
    self_fallbacks = sum(1 for word in result if not index.outgoing(word))

    return {
        "input_chars": len(text),
        "model": {
            "token_count": len(tokens),
            "indexed_tokens": len(index.sequence),
            "distinct_words": len(result),
            "transition_pairs": sum(len(following) for following in index.transitions.values()),
            "self_fallback_words": self_fallbacks,
            "fallback_pool_size": len(all_candidates(result)),
            "pos_distribution": dict(pos_counter.most_common()),
        },
        "timing": {
            "iterations": iterations,
            "warmup": warmup,
            "tokenize_mean_ms": round(statistics.mean(tokenize_ms), 3),
            "tokenize_median_ms": round(statistics.median(tokenize_ms), 3),
            "model_mean_ms": round(statistics.mean(model_ms), 3),
            "model_median_ms": round(statistics.median(model_ms), 3),
            "model_max_ms": round(max(model_ms), 3),
        },
        "metadata": tokenizer.metadata(),
    }


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Benchmark tokenization and next-word model building")
    parser.add_argument("source", type=Path, help="UTF-8 text file to analyze")
    parser.add_argument("--iterations", type=int, default=20, help="Number of benchmark iterations")
    parser.add_argument("--warmup", type=int, default=2, help="Number of warmup iterations")
    return parser.parse_args()


if __name__ == "__main__":
    args = parse_args()
    if args.iterations < 1:
        raise SystemExit("--iterations must be >= 1")
    if args.warmup < 0:
        raise SystemExit("--warmup must be >= 0")
    if not args.source.exists():
        raise SystemExit(f"source not found: {args.source}")

    text = args.source.read_text(encoding="utf-8")
    print(json.dumps(run_benchmark(text, args.iterations, args.warmup), ensure_ascii=False))
