"""Visualization utilities for generation benchmark results."""

from __future__ import annotations
import os
from typing import List

import matplotlib.pyplot as plt
import seaborn as sns
import numpy as np

from .benchmark import BenchmarkResult


class Visualizer:
    """
    Chart generator for generation benchmark results.

    Creates charts comparing strategies across difficulties.
    """

    COLORS = {
        "subtractive": "#3498db",  # Blue
        "trivial": "#f39c12",      # Orange
    }

    def __init__(self, results: List[BenchmarkResult], output_dir: str = "results"):
        """
        Initialize the visualizer.

        Args:
            results: List of benchmark results.
            output_dir: Directory to save generated charts.
        """
        self.results = results
        self.output_dir = output_dir
        os.makedirs(output_dir, exist_ok=True)

        plt.style.use('seaborn-v0_8-whitegrid')
        sns.set_palette("husl")

    def generate_all(self) -> List[str]:
        """
        Generate all charts.

        Returns:
            List of paths to generated chart files.
        """
        return [
            self.plot_time_by_difficulty(),
            self.plot_time_distribution(),
            self.plot_restarts(),
        ]

    def _difficulties(self) -> List[str]:
        # keep the order results were produced in
        seen = []
        for r in self.results:
            if r.difficulty not in seen:
                seen.append(r.difficulty)
        return seen

    def _save(self, name: str) -> str:
        plt.tight_layout()
        path = os.path.join(self.output_dir, name)
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close()
        return path

    def plot_time_by_difficulty(self) -> str:
        """Create grouped bar chart of generation times by difficulty and strategy."""
        fig, ax = plt.subplots(figsize=(12, 6))

        strategies = sorted(set(r.strategy for r in self.results))
        difficulties = self._difficulties()

        x = np.arange(len(difficulties))
        width = 0.8 / max(len(strategies), 1)

        for i, strategy in enumerate(strategies):
            times = []
            for diff in difficulties:
                group = [
                    r.time_seconds for r in self.results
                    if r.strategy == strategy and r.difficulty == diff
                ]
                times.append(np.mean(group) if group else 0)

            offset = (i - len(strategies) / 2 + 0.5) * width
            ax.bar(x + offset, times, width,
                   label=strategy,
                   color=self.COLORS.get(strategy, "#95a5a6"),
                   edgecolor='black', linewidth=0.5)

        ax.set_xlabel('Difficulty', fontsize=12)
        ax.set_ylabel('Average Time (seconds)', fontsize=12)
        ax.set_title('Generation Time by Difficulty and Strategy', fontsize=14, fontweight='bold')
        ax.set_xticks(x)
        ax.set_xticklabels([d.capitalize() for d in difficulties])
        ax.legend(title='Strategy')
        ax.set_ylim(bottom=0)

        return self._save("time_by_difficulty.png")

    def plot_time_distribution(self) -> str:
        """Create box plot of generation times per difficulty."""
        fig, ax = plt.subplots(figsize=(12, 6))

        sns.boxplot(
            x=[r.difficulty.capitalize() for r in self.results],
            y=[r.time_seconds for r in self.results],
            hue=[r.strategy for r in self.results],
            palette=self.COLORS,
            ax=ax,
        )

        ax.set_xlabel('Difficulty', fontsize=12)
        ax.set_ylabel('Time (seconds)', fontsize=12)
        ax.set_title('Generation Time Distribution', fontsize=14, fontweight='bold')

        return self._save("time_distribution.png")

    def plot_restarts(self) -> str:
        """Create bar chart of average reshuffles and restarts per difficulty."""
        fig, ax = plt.subplots(figsize=(10, 6))

        difficulties = self._difficulties()
        x = np.arange(len(difficulties))
        reshuffles = []
        restarts = []
        for diff in difficulties:
            group = [r for r in self.results if r.difficulty == diff]
            reshuffles.append(np.mean([r.reshuffles for r in group]))
            restarts.append(np.mean([r.restarts for r in group]))

        ax.bar(x - 0.2, reshuffles, 0.4, label='Reshuffles', color="#9b59b6",
               edgecolor='black', linewidth=0.5)
        ax.bar(x + 0.2, restarts, 0.4, label='Solution restarts', color="#e74c3c",
               edgecolor='black', linewidth=0.5)

        ax.set_xlabel('Difficulty', fontsize=12)
        ax.set_ylabel('Average Count', fontsize=12)
        ax.set_title('Restarts per Generated Puzzle', fontsize=14, fontweight='bold')
        ax.set_xticks(x)
        ax.set_xticklabels([d.capitalize() for d in difficulties])
        ax.legend()
        ax.set_ylim(bottom=0)

        return self._save("restarts.png")
