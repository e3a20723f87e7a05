# -*- coding: utf-8 -*-
"""
Created on Mon Feb  2 10:15:07 2026

@author: bboyg
"""

from dataclasses import dataclass
import numbers

import numpy as np
from scipy.constants import c as SPEED_OF_LIGHT

import ula_formulas as uf
from utils_angles import deg2rad


@dataclass
class ArrayParams:
    """
    Uniform linear array + radar link parameter container.

    f_hz          : carrier frequency [Hz]
    n_elements    : number of elements N (>= 1)
    spacing_m     : element spacing d [m]
    steer_rad     : steering angle psi [rad], from broadside
    p_tx_w        : transmit power [W]
    rcs_m2        : target radar cross section [m^2]
    wave_velocity : propagation speed [m/s], speed of light by default

    The formula library does no checking at all, so everything a caller could
    get wrong is checked here instead (ValueError).
    """

    f_hz: float
    n_elements: int
    spacing_m: float
    steer_rad: float = 0.0

    p_tx_w: float = 1.0
    rcs_m2: float = 1.0
    wave_velocity: float = SPEED_OF_LIGHT

    def __post_init__(self):
        if isinstance(self.n_elements, bool) or not isinstance(self.n_elements, numbers.Integral):
            raise ValueError(f"n_elements must be an integer, got {self.n_elements!r}.")
        self.n_elements = int(self.n_elements)

        self.f_hz = float(self.f_hz)
        self.spacing_m = float(self.spacing_m)
        self.steer_rad = float(self.steer_rad)
        self.p_tx_w = float(self.p_tx_w)
        self.rcs_m2 = float(self.rcs_m2)
        self.wave_velocity = float(self.wave_velocity)

        if self.n_elements < 1:
            raise ValueError(f"n_elements must be >= 1, got {self.n_elements}.")

        for name in ("f_hz", "spacing_m", "p_tx_w", "rcs_m2", "wave_velocity"):
            val = getattr(self, name)
            if not np.isfinite(val) or val <= 0:
                raise ValueError(f"{name} must be finite and > 0, got {val}.")

        if not np.isfinite(self.steer_rad):
            raise ValueError(f"steer_rad must be finite, got {self.steer_rad}.")

    @staticmethod
    def from_degrees(f_hz: float, n_elements: int, spacing_m: float, steer_deg: float = 0.0,
                     p_tx_w: float = 1.0, rcs_m2: float = 1.0,
                     wave_velocity: float = SPEED_OF_LIGHT):
        return ArrayParams(f_hz, n_elements, spacing_m, deg2rad(steer_deg),
                           p_tx_w, rcs_m2, wave_velocity)

    @staticmethod
    def half_wavelength(f_hz: float, n_elements: int, steer_deg: float = 0.0,
                        p_tx_w: float = 1.0, rcs_m2: float = 1.0,
                        wave_velocity: float = SPEED_OF_LIGHT):
        """
        Array with d = lambda / 2 (the largest grating-lobe-free spacing).
        """
        lam = float(uf.wavelength(wave_velocity, f_hz))
        return ArrayParams.from_degrees(f_hz, n_elements, 0.5 * lam, steer_deg,
                                        p_tx_w, rcs_m2, wave_velocity)

    # ---------------------------------------------------------
    # Derived quantities
    # ---------------------------------------------------------
    @property
    def wavelength(self) -> float:
        return float(uf.wavelength(self.wave_velocity, self.f_hz))

    @property
    def wavenumber(self) -> float:
        return float(uf.wavenumber(self.wavelength))

    @property
    def spacing_lambda(self) -> float:
        """Element spacing in wavelengths (d / lambda)."""
        return self.spacing_m / self.wavelength
