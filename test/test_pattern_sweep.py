# -*- coding: utf-8 -*-
"""
Created on Tue Feb  3 13:15:46 2026

@author: bboyg
"""

import numpy as np
import pytest

from array_params import ArrayParams
from ula_array import UniformLinearArray
from pattern_sweep import sweep_pattern, find_lobes, find_nulls, sweep_range, sweep_steering


def unit_params(spacing=0.5, n=8):
    return ArrayParams(f_hz=1.0, n_elements=n, spacing_m=spacing, wave_velocity=1.0)

def test_sweep_pattern_columns_and_normalisation():
    df = sweep_pattern(UniformLinearArray(unit_params()), n_points=721)
    assert len(df) == 721
    for col in ["theta_rad", "theta_deg", "u", "af", "af_dB", "is_null"]:
        assert col in df.columns

    assert (df["af"] >= 0.0).all()
    assert abs(np.nanmax(df["af_dB"].to_numpy())) < 1e-12
    assert abs(df["theta_deg"].iloc[0] + 90.0) < 1e-9
    assert abs(df["theta_deg"].iloc[-1] - 90.0) < 1e-9

def test_sweep_pattern_bad_grid():
    arr = UniformLinearArray(unit_params())
    with pytest.raises(ValueError):
        sweep_pattern(arr, n_points=1)
    with pytest.raises(ValueError):
        sweep_pattern(arr, theta_min_rad=0.5, theta_max_rad=0.5)

def test_find_lobes_sorted_strongest_first():
    df = sweep_pattern(UniformLinearArray(unit_params()))
    lobes = find_lobes(df)
    assert len(lobes) > 0
    assert "prominence" in lobes.columns
    af = lobes["af"].to_numpy()
    assert np.all(np.diff(af) <= 0.0)

def test_find_nulls_includes_steering_direction():
    # broadside steering: product-form AF is zero at theta = 0
    df = sweep_pattern(UniformLinearArray(unit_params()), n_points=1801)
    nulls = find_nulls(df)
    assert len(nulls) > 0
    assert np.min(np.abs(nulls["theta_rad"].to_numpy())) < 1e-3

def test_sweep_range_r4():
    arr = UniformLinearArray(unit_params())
    df = sweep_range(arr, [1000.0, 2000.0, 4000.0], radial_velocity=1.0)
    pr = df["received_power_w"].to_numpy()
    assert abs(pr[0] / pr[1] - 16.0) < 1e-9
    assert abs(pr[1] / pr[2] - 16.0) < 1e-9
    assert (df["doppler_hz"] == 2.0).all()

def test_sweep_range_empty():
    with pytest.raises(ValueError):
        sweep_range(UniformLinearArray(unit_params()), [])

def test_sweep_steering_counts_grating_lobes():
    df = sweep_steering(unit_params(spacing=1.0), [0.0, np.pi / 6])
    assert list(df["n_grating_lobes"]) == [2, 1]
    assert abs(df["grating_lobes_deg"].iloc[1][0] + 30.0) < 1e-9

def test_sweep_steering_half_wave_clean():
    df = sweep_steering(unit_params(), np.linspace(-0.5, 0.5, 5))
    assert (df["n_grating_lobes"] == 0).all()
    assert (df["hpbw_rad"] >= df["fnbw_rad"] - 1e-15).all()
