# -*- coding: utf-8 -*-
"""
Created on Mon Feb  2 10:02:51 2026

@author: bboyg
"""

import numpy as np


# ============================================================
# Angle utilities
# ============================================================

def deg2rad(deg: float) -> float:
    """
    Converts angle from degrees to radians.

    """
    return deg * np.pi / 180.0


def rad2deg(rad: float) -> float:
    """
    Converts angle from radians to degrees.

    """
    return rad * 180.0 / np.pi


def angle_wrap(ang: float) -> float:
    """
    Wrap angle to [-pi, +pi).

    The Doppler phase formulas return unwrapped phase, use this to reduce it.
    """
    return (ang + np.pi) % (2.0 * np.pi) - np.pi


def angle_wrap_2pi(ang: float) -> float:
    """
    Wrap angle to [0, 2pi).
    """
    return ang % (2.0 * np.pi)


# ============================================================
# Decibels
# ============================================================

def db10(x):
    """
    Power ratio -> dB. Non-positive values map to NaN instead of -inf / warnings.
    """
    x = np.asarray(x, dtype=float)
    out = np.full_like(x, np.nan, dtype=float)
    m = np.isfinite(x) & (x > 0)
    out[m] = 10.0 * np.log10(x[m])
    return out[()]


def from_db10(x_db):
    return 10.0 ** (np.asarray(x_db, dtype=float) / 10.0)
