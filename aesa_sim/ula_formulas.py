# -*- coding: utf-8 -*-
"""
Created on Mon Feb  2 09:20:15 2026

@author: bboyg

Closed-form formulas for a uniform linear array (ULA) and a monostatic radar link.

Conventions:
    - All angles are radians, measured from broadside.
    - Distances, velocities and powers only need to be in one consistent unit system.
    - Nothing here validates inputs. Division by zero, log of non-positive counts,
      cos(theta) = 0 etc. return inf / NaN exactly as IEEE-754 arithmetic gives them.
    - pi is the fixed constant PI from ula_constants.

Every function is written with numpy ufuncs, so numpy arrays work as well as scalars.
"""

import numpy as np

from ula_constants import PI, NULL_TOLERANCE


# IEEE-754 results (inf, NaN, overflow to inf, underflow to 0) come back silently
IEEE_QUIET = dict(divide="ignore", invalid="ignore", over="ignore", under="ignore")


# ============================================================
# Wave basics
# ============================================================

@np.errstate(**IEEE_QUIET)
def wavelength(wave_velocity, frequency_hz):
    """
    lambda = v / f
    """
    return np.divide(wave_velocity, frequency_hz)


@np.errstate(**IEEE_QUIET)
def wavenumber(wavelength_m):
    """
    k = 2 pi / lambda   [rad / distance]
    """
    return np.divide(2.0 * PI, wavelength_m)


# ============================================================
# Array factor kernel
# ============================================================

@np.errstate(**IEEE_QUIET)
def phase_param(steer_rad, theta_rad, k, d):
    """
    Inter-element phase progression of the ULA:

        u = k * d * (sin(psi) - sin(theta))

    steer_rad : steering angle psi
    theta_rad : observation angle theta
    k         : wavenumber [rad / distance]
    d         : element spacing
    """
    return k * d * (np.sin(steer_rad) - np.sin(theta_rad))


@np.errstate(**IEEE_QUIET)
def array_factor(u, n_elements):
    """
    AF = | sin(u/2) * sin(N u/2) |

    This is the product form, NOT the textbook ratio sin(Nu/2) / sin(u/2).
    It is not normalised and its peak is not N.
    """
    half_u = 0.5 * u
    return np.abs(np.sin(half_u) * np.sin(n_elements * half_u))


@np.errstate(**IEEE_QUIET)
def is_null_direction(u, n_elements):
    """
    Null when sin(N u / 2) = 0, tested against NULL_TOLERANCE.
    """
    return np.abs(np.sin(0.5 * n_elements * u)) < NULL_TOLERANCE


def main_lobe_angle(steer_rad):
    # main lobe sits on the steering angle
    return steer_rad


# ============================================================
# Beamwidth
# ============================================================

@np.errstate(**IEEE_QUIET)
def fnbw(wavelength_m, n_elements, d):
    """
    First null beamwidth [rad]: FNBW ~ 2 lambda / (N d)
    """
    return np.divide(2.0 * wavelength_m, n_elements * d)


@np.errstate(**IEEE_QUIET)
def hpbw(wavelength_m, n_elements, d, theta_rad):
    """
    Half power beamwidth [rad]: HPBW ~ 2 lambda / (N d cos(theta))

    Blows up towards endfire (theta -> +-pi/2).
    """
    return np.divide(2.0 * wavelength_m, n_elements * d * np.cos(theta_rad))


@np.errstate(**IEEE_QUIET)
def hpbw_broadside(wavelength_m, n_elements, d):
    """
    Half power beamwidth at broadside (theta = 0): 2 lambda / (N d)
    """
    return np.divide(2.0 * wavelength_m, n_elements * d)


# ============================================================
# Grating lobes
# ============================================================

@np.errstate(**IEEE_QUIET)
def grating_lobe_angle(steer_rad, m, wavelength_m, d):
    """
    Grating lobe of order m:

        sin(theta_g) = sin(psi) + m * (lambda / d)

    Returns theta_g [rad], or NaN when the right hand side is outside [-1, 1]
    (no grating lobe of that order in visible space).
    """
    rhs = np.sin(steer_rad) + m * np.divide(wavelength_m, d)
    visible = (rhs >= -1.0) & (rhs <= 1.0)
    theta_g = np.where(visible, np.arcsin(np.clip(rhs, -1.0, 1.0)), np.nan)
    return theta_g[()]


def spacing_is_safe(d, wavelength_m):
    """
    No grating lobes anywhere in visible space when d <= lambda / 2.
    """
    return d <= 0.5 * wavelength_m


# ============================================================
# Array gain
# ============================================================

def gain_linear(n_elements):
    # isotropic elements: G ~ N
    return np.asarray(n_elements, dtype=float)[()]


@np.errstate(**IEEE_QUIET)
def gain_db(n_elements):
    return 10.0 * np.log10(np.asarray(n_elements, dtype=float))


# ============================================================
# Radar range equation
# ============================================================

@np.errstate(**IEEE_QUIET)
def received_power(p_tx, gain, wavelength_m, rcs, range_m):
    """
    Monostatic free-space received power from a point target:

        P_r = P_t G^2 lambda^2 sigma / ((4 pi)^3 R^4)

    Same power unit as p_tx.
    """
    four_pi = 4.0 * PI
    num = p_tx * (gain * gain) * (wavelength_m * wavelength_m) * rcs
    den = (four_pi * four_pi * four_pi) * (range_m * range_m * range_m * range_m)
    return np.divide(num, den)


# ============================================================
# Doppler
# ============================================================

@np.errstate(**IEEE_QUIET)
def doppler_frequency(radial_velocity, wavelength_m):
    """
    f_d = 2 v_r / lambda

    Sign of v_r carries straight through to f_d.
    """
    return np.divide(2.0 * radial_velocity, wavelength_m)


@np.errstate(**IEEE_QUIET)
def doppler_phase_delta(doppler_hz, t):
    """
    Accumulated Doppler phase 2 pi f_d t [rad], unwrapped.
    """
    return 2.0 * PI * doppler_hz * t


@np.errstate(**IEEE_QUIET)
def doppler_phase_instant(phi0_rad, doppler_hz, t):
    """
    phi(t) = phi0 + 2 pi f_d t [rad], unwrapped.
    """
    return phi0_rad + 2.0 * PI * doppler_hz * t


# ============================================================
# Angle estimation
# ============================================================

@np.errstate(**IEEE_QUIET)
def angle_from_phase_difference(dphi_rad, wavelength_m, d):
    """
    Angle of arrival from the phase difference between two adjacent elements:

        psi = asin( lambda * dphi / (2 pi d) )

    The argument is clamped to [-1, 1] before asin, so a noisy phase saturates
    at endfire (+-pi/2) instead of giving NaN.
    """
    arg = np.divide(wavelength_m * dphi_rad, 2.0 * PI * d)
    return np.arcsin(np.clip(arg, -1.0, 1.0))


@np.errstate(**IEEE_QUIET)
def angle_resolution_limit(wavelength_m, n_elements, d):
    """
    Smallest resolvable angular separation [rad]: lambda / (N d)
    """
    return np.divide(wavelength_m, n_elements * d)
