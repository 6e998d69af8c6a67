"""Benchmark module for comparing puzzle generation strategies."""

from .benchmark import GenerationBenchmark, BenchmarkResult

__all__ = ["GenerationBenchmark", "BenchmarkResult"]
