# -*- coding: utf-8 -*-
"""
Created on Tue Feb  3 10:02:17 2026

@author: bboyg
"""

import numpy as np
import pytest
from scipy.constants import c

from array_params import ArrayParams


def test_defaults_and_derived_quantities():
    p = ArrayParams(f_hz=4e9, n_elements=16, spacing_m=0.0375)
    assert p.wave_velocity == c
    assert p.steer_rad == 0.0
    assert abs(p.wavelength - c / 4e9) < 1e-15
    assert abs(p.spacing_lambda - 0.0375 / (c / 4e9)) < 1e-12
    assert p.wavenumber > 0

def test_half_wavelength_spacing():
    p = ArrayParams.half_wavelength(f_hz=1.0, n_elements=8, wave_velocity=1.0)
    assert p.spacing_m == 0.5
    assert p.spacing_lambda == 0.5

def test_from_degrees_converts_steering():
    p = ArrayParams.from_degrees(1.0, 8, 0.5, steer_deg=30.0, wave_velocity=1.0)
    assert abs(p.steer_rad - np.pi / 6) < 1e-12

def test_numpy_integer_element_count_accepted():
    p = ArrayParams(f_hz=1.0, n_elements=np.int64(4), spacing_m=0.5, wave_velocity=1.0)
    assert p.n_elements == 4
    assert isinstance(p.n_elements, int)

@pytest.mark.parametrize("kwargs", [
    dict(n_elements=0),
    dict(n_elements=-3),
    dict(n_elements=2.5),
    dict(n_elements=True),
    dict(f_hz=0.0),
    dict(spacing_m=-0.1),
    dict(p_tx_w=0.0),
    dict(rcs_m2=np.inf),
    dict(wave_velocity=np.nan),
    dict(steer_rad=np.nan),
])
def test_invalid_params_raise(kwargs):
    base = dict(f_hz=1.0, n_elements=8, spacing_m=0.5, wave_velocity=1.0)
    base.update(kwargs)
    with pytest.raises(ValueError):
        ArrayParams(**base)
