# graphing_manager.py

import numpy as np
import matplotlib.pyplot as plt
import logger as log
import constants as C

class GraphingManager:
    """
    Collects sampled noise values and plots their distribution after a render,
    as a quick visual check that the field stays inside its expected range.
    """
    def __init__(self):
        self.samples = []
        log.log("GraphingManager initialized.")

    def add_samples(self, values):
        """
        Adds a batch of noise values (any array-like shape) to the collection.
        """
        self.samples.append(np.asarray(values, dtype=np.float64).ravel())

    def has_data(self):
        return any(batch.size for batch in self.samples)

    def all_values(self):
        if not self.samples:
            return np.empty(0, dtype=np.float64)
        return np.concatenate(self.samples)

    def summarize(self):
        """
        Returns min/max/mean/std over the finite collected values, plus how many
        fell outside the regression limit.
        """
        values = self.all_values()
        finite = values[np.isfinite(values)]
        if finite.size == 0:
            return {'count': 0, 'min': None, 'max': None, 'mean': None, 'std': None, 'out_of_range': 0}
        out_of_range = int(np.count_nonzero(np.abs(finite) > C.NOISE_REGRESSION_LIMIT))
        return {
            'count': int(finite.size),
            'min': float(np.min(finite)),
            'max': float(np.max(finite)),
            'mean': float(np.mean(finite)),
            'std': float(np.std(finite)),
            'out_of_range': out_of_range,
        }

    def log_summary(self):
        stats = self.summarize()
        if stats['count'] == 0:
            log.log("[GraphingManager] No finite samples collected.")
            return stats
        log.log(f"[GraphingManager] {stats['count']} samples: min={stats['min']:.4f}, max={stats['max']:.4f}, mean={stats['mean']:.4f}, std={stats['std']:.4f}")
        if stats['out_of_range']:
            log.log(f"[GraphingManager] WARNING: {stats['out_of_range']} samples outside [-{C.NOISE_REGRESSION_LIMIT}, {C.NOISE_REGRESSION_LIMIT}].")
        return stats

    def generate_and_save_histogram(self, file_path=C.OUTPUT_HISTOGRAM_PATH):
        """
        Uses matplotlib to generate and save a histogram of the collected noise values.
        Returns True when the file was written.
        """
        values = self.all_values()
        values = values[np.isfinite(values)]
        if values.size == 0:
            log.log("[GraphingManager] No data collected, skipping plot generation.")
            return False

        log.log(f"[GraphingManager] Generating value histogram with {values.size} samples...")

        fig, ax = plt.subplots(figsize=C.GRAPH_FIGURE_SIZE)

        ax.hist(values, bins=C.HISTOGRAM_BIN_COUNT, color='tab:gray', label='Noise Values')
        ax.axvline(C.EXPECTED_NOISE_MIN, color='r', linestyle='--', linewidth=0.8, label='Expected Range')
        ax.axvline(C.EXPECTED_NOISE_MAX, color='r', linestyle='--', linewidth=0.8)

        ax.set_title('Perlin Noise: Value Distribution')
        ax.set_xlabel('Noise Value')
        ax.set_ylabel('Sample Count')
        ax.grid(True, which='both', linestyle='--', linewidth=0.5)
        ax.legend()

        fig.tight_layout()

        try:
            fig.savefig(file_path)
            log.log(f"[GraphingManager] Histogram saved to {file_path}")
            return True
        except OSError as e:
            log.log(f"[GraphingManager] ERROR: Could not save histogram. Reason: {e}")
            return False
        finally:
            plt.close(fig)
