# -*- coding: utf-8 -*-
"""
Created on Mon Feb  2 11:03:36 2026

@author: bboyg
"""

import numpy as np

from array_params import ArrayParams
import ula_formulas as uf
from utils_angles import angle_wrap, db10


class UniformLinearArray:
    """
    One configured ULA feeding a monostatic radar link.

    Conventions:
        - Angles in radians, measured from broadside
        - Steering angle fixed by params.steer_rad
        - Gain taken as the array gain N (isotropic elements)

    All physics comes from ula_formulas; this class only wires the
    formulas together for one parameter set.
    """

    def __init__(self, params: ArrayParams):
        self.p = params

        self.lam = self.p.wavelength
        self.k = self.p.wavenumber
        self.d = self.p.spacing_m
        self.n = self.p.n_elements
        self.steer_rad = self.p.steer_rad

    # ---------------------------------------------------------
    # Pattern
    # ---------------------------------------------------------
    def u(self, theta_rad):
        return uf.phase_param(self.steer_rad, theta_rad, self.k, self.d)

    def pattern(self, theta_rad):
        """
        Array factor (product form, not normalised) at observation angle(s) theta.
        """
        return uf.array_factor(self.u(theta_rad), self.n)

    def is_null(self, theta_rad):
        return uf.is_null_direction(self.u(theta_rad), self.n)

    @property
    def main_lobe_rad(self) -> float:
        return uf.main_lobe_angle(self.steer_rad)

    # ---------------------------------------------------------
    # Beamwidths
    # ---------------------------------------------------------
    def beamwidths(self):
        """
        Returns dict of beamwidth figures [rad]. HPBW is evaluated at the
        steering angle.
        """
        return {
            "fnbw_rad": float(uf.fnbw(self.lam, self.n, self.d)),
            "hpbw_rad": float(uf.hpbw(self.lam, self.n, self.d, self.steer_rad)),
            "hpbw_broadside_rad": float(uf.hpbw_broadside(self.lam, self.n, self.d)),
            "resolution_rad": float(uf.angle_resolution_limit(self.lam, self.n, self.d)),
        }

    # ---------------------------------------------------------
    # Grating lobes
    # ---------------------------------------------------------
    @property
    def spacing_safe(self) -> bool:
        return bool(uf.spacing_is_safe(self.d, self.lam))

    def grating_lobes(self, max_order: int = 3):
        """
        Grating lobes in visible space for orders m = -max_order..max_order (m != 0).

        Returns:
            list of (m, theta_g_rad), orders without a real solution left out
        """
        if max_order < 1:
            raise ValueError(f"max_order must be >= 1, got {max_order}.")

        lobes = []
        for m in range(-max_order, max_order + 1):
            if m == 0:
                continue
            theta_g = uf.grating_lobe_angle(self.steer_rad, m, self.lam, self.d)
            if np.isnan(theta_g):
                continue
            lobes.append((m, float(theta_g)))
        return lobes

    # ---------------------------------------------------------
    # Gain
    # ---------------------------------------------------------
    @property
    def gain_linear(self) -> float:
        return float(uf.gain_linear(self.n))

    @property
    def gain_db(self) -> float:
        return float(uf.gain_db(self.n))

    # ---------------------------------------------------------
    # Radar link (one look at one target)
    # ---------------------------------------------------------
    def link(self, range_m, radial_velocity, t=0.0, phi0_rad=0.0):
        """
        Received power and Doppler for a point target.

        Inputs:
            range_m         : target range [m]
            radial_velocity : [m/s], positive = closing (positive Doppler)
            t               : time since phi0 [s]
            phi0_rad        : initial phase [rad]

        Returns:
            dict with link fields
        """
        pr = uf.received_power(self.p.p_tx_w, self.gain_linear, self.lam,
                               self.p.rcs_m2, range_m)
        fd = uf.doppler_frequency(radial_velocity, self.lam)
        dphi = uf.doppler_phase_delta(fd, t)
        phi = uf.doppler_phase_instant(phi0_rad, fd, t)

        return {
            "t": t,
            "range_m": range_m,
            "radial_velocity": radial_velocity,
            "received_power_w": float(pr),
            "received_power_dBW": float(db10(pr)),
            "doppler_hz": float(fd),
            "doppler_phase_delta_rad": float(dphi),
            "doppler_phase_rad": float(phi),
            "doppler_phase_wrapped_rad": float(angle_wrap(phi)),
        }

    # ---------------------------------------------------------
    # Angle of arrival
    # ---------------------------------------------------------
    def estimate_angle(self, dphi_rad) -> float:
        """
        Angle of arrival from the phase difference between adjacent elements.
        Saturates at +-pi/2.
        """
        return float(uf.angle_from_phase_difference(dphi_rad, self.lam, self.d))
