# -*- coding: utf-8 -*-
"""
Created on Mon Feb  2 13:40:18 2026

@author: bboyg
"""

from dataclasses import replace

import numpy as np
import pandas as pd
from scipy.signal import find_peaks

from array_params import ArrayParams
from ula_array import UniformLinearArray
import ula_formulas as uf
from utils_angles import db10, rad2deg


# ============================================================
# Pattern vs observation angle
# ============================================================

def sweep_pattern(array: UniformLinearArray,
                  theta_min_rad: float = -np.pi / 2,
                  theta_max_rad: float = np.pi / 2,
                  n_points: int = 1801) -> pd.DataFrame:
    """
    Evaluate the array factor over a grid of observation angles.

    Output columns:
        theta_rad, theta_deg, u, af, af_dB, is_null

    af_dB is 20 log10(af / max(af)) over the sweep (NaN where af = 0).
    """
    if n_points < 2:
        raise ValueError(f"n_points must be >= 2, got {n_points}.")
    if theta_max_rad <= theta_min_rad:
        raise ValueError("theta_max_rad must be greater than theta_min_rad.")

    theta = np.linspace(theta_min_rad, theta_max_rad, n_points)
    u = array.u(theta)
    af = uf.array_factor(u, array.n)

    peak = float(np.max(af))
    if peak > 0:
        af_dB = db10((af / peak) ** 2)
    else:
        af_dB = np.full_like(af, np.nan)

    return pd.DataFrame({
        "theta_rad": theta,
        "theta_deg": rad2deg(theta),
        "u": u,
        "af": af,
        "af_dB": af_dB,
        "is_null": uf.is_null_direction(u, array.n),
    })


def find_lobes(df: pd.DataFrame, min_prominence: float = 1e-3) -> pd.DataFrame:
    """
    Local maxima of the swept pattern (scipy find_peaks on the linear af column).

    Returns the matching rows of df plus a 'prominence' column, strongest first.
    """
    af = df["af"].to_numpy()
    idx, props = find_peaks(af, prominence=min_prominence)

    lobes = df.iloc[idx].copy()
    lobes["prominence"] = props["prominences"]
    return lobes.sort_values("af", ascending=False).reset_index(drop=True)


def find_nulls(df: pd.DataFrame) -> pd.DataFrame:
    """
    Null directions in the sweep: grid points flagged by the exact null test,
    plus local minima of the pattern (a grid rarely lands exactly on a null).
    """
    af = df["af"].to_numpy()
    idx_min, _ = find_peaks(-af)

    m = df["is_null"].to_numpy().astype(bool)
    m[idx_min] = True

    return df[m].reset_index(drop=True)


# ============================================================
# Link budget vs range
# ============================================================

def sweep_range(array: UniformLinearArray, ranges_m, radial_velocity: float = 0.0,
                t: float = 0.0) -> pd.DataFrame:
    """
    One link() row per range.
    """
    ranges_m = np.atleast_1d(np.asarray(ranges_m, dtype=float))
    if ranges_m.size == 0:
        raise ValueError("ranges_m is empty.")

    rows = [array.link(float(r), radial_velocity, t=t) for r in ranges_m]
    return pd.DataFrame(rows)


# ============================================================
# Steering sweep
# ============================================================

def sweep_steering(params: ArrayParams, steer_rad_values, max_order: int = 2) -> pd.DataFrame:
    """
    Beamwidth / grating lobe table as the beam is steered.

    Output columns:
        steer_rad, steer_deg, hpbw_rad, fnbw_rad, n_grating_lobes, grating_lobes_deg
    """
    rows = []
    for steer in np.atleast_1d(np.asarray(steer_rad_values, dtype=float)):
        array = UniformLinearArray(replace(params, steer_rad=float(steer)))

        bw = array.beamwidths()
        lobes = array.grating_lobes(max_order=max_order)

        rows.append({
            "steer_rad": float(steer),
            "steer_deg": float(rad2deg(steer)),
            "hpbw_rad": bw["hpbw_rad"],
            "fnbw_rad": bw["fnbw_rad"],
            "n_grating_lobes": len(lobes),
            "grating_lobes_deg": [float(rad2deg(th)) for _, th in lobes],
        })

    return pd.DataFrame(rows)
