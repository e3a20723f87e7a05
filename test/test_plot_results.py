# -*- coding: utf-8 -*-
"""
Created on Tue Feb  3 16:02:38 2026

@author: bboyg
"""

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np

from array_params import ArrayParams
from ula_array import UniformLinearArray
from pattern_sweep import sweep_pattern, sweep_range
from plot_results import load_output, plot_pattern, plot_pattern_polar, plot_link_vs_range


def test_plots_build_without_showing(tmp_path):
    arr = UniformLinearArray(ArrayParams(f_hz=1.0, n_elements=8, spacing_m=0.5, wave_velocity=1.0))
    df_pat = sweep_pattern(arr, n_points=361)
    df_link = sweep_range(arr, np.linspace(100.0, 1000.0, 10))

    csv = tmp_path / "ula_pattern.csv"
    df_pat.to_csv(csv, index=False)
    df_back = load_output(str(csv))
    assert len(df_back) == 361

    for fig in (plot_pattern(df_back, show=False),
                plot_pattern_polar(df_back, show=False),
                plot_link_vs_range(df_link, show=False)):
        assert fig is not None
        plt.close(fig)
