# -*- coding: utf-8 -*-
"""
Created on Mon Feb  2 16:05:44 2026

@author: bboyg
"""

import argparse
import os

import numpy as np

from array_params import ArrayParams
from ula_array import UniformLinearArray
from pattern_sweep import sweep_pattern, find_lobes, find_nulls, sweep_range
from utils_angles import rad2deg


def parse_args(argv=None):
    ap = argparse.ArgumentParser(description="ULA pattern + radar link summary")
    ap.add_argument("--f-hz", type=float, default=4e9, help="carrier frequency [Hz]")
    ap.add_argument("--n-elements", type=int, default=16)
    ap.add_argument("--spacing-m", type=float, default=None,
                    help="element spacing [m], default lambda/2")
    ap.add_argument("--steer-deg", type=float, default=0.0)
    ap.add_argument("--p-tx-w", type=float, default=2e6)
    ap.add_argument("--rcs-m2", type=float, default=10.0)
    ap.add_argument("--range-km", type=float, default=20.0)
    ap.add_argument("--radial-velocity", type=float, default=150.0, help="[m/s]")
    ap.add_argument("--out-dir", default=".")
    ap.add_argument("--plot", action="store_true")
    return ap.parse_args(argv)


def build_params(args) -> ArrayParams:
    if args.spacing_m is None:
        return ArrayParams.half_wavelength(args.f_hz, args.n_elements, args.steer_deg,
                                           p_tx_w=args.p_tx_w, rcs_m2=args.rcs_m2)
    return ArrayParams.from_degrees(args.f_hz, args.n_elements, args.spacing_m, args.steer_deg,
                                    p_tx_w=args.p_tx_w, rcs_m2=args.rcs_m2)


def main(argv=None):
    args = parse_args(argv)
    try:
        params = build_params(args)
    except ValueError as e:
        raise SystemExit(f"Invalid array parameters: {e}")

    array = UniformLinearArray(params)

    print(f"lambda = {params.wavelength:.4f} m | d = {params.spacing_m:.4f} m "
          f"({params.spacing_lambda:.2f} lambda) | N = {params.n_elements}")
    print(f"steer  = {rad2deg(array.main_lobe_rad):6.1f}° | "
          f"gain = {array.gain_db:5.1f} dB | spacing safe = {array.spacing_safe}")

    bw = array.beamwidths()
    print(f"FNBW = {rad2deg(bw['fnbw_rad']):6.2f}° | HPBW = {rad2deg(bw['hpbw_rad']):6.2f}° "
          f"| resolution = {rad2deg(bw['resolution_rad']):6.2f}°")

    lobes = array.grating_lobes()
    if lobes:
        for m, th in lobes:
            print(f"  grating lobe m={m:+d}: {rad2deg(th):6.1f}°")
    else:
        print("  no grating lobes in visible space")

    meas = array.link(args.range_km * 1000.0, args.radial_velocity)
    print(f"R = {args.range_km:.1f} km | Pr = {meas['received_power_dBW']:6.1f} dBW | "
          f"fd = {meas['doppler_hz']:.1f} Hz")

    df_pat = sweep_pattern(array)
    df_link = sweep_range(array, np.linspace(1e3, 2.0 * args.range_km * 1000.0, 200),
                          args.radial_velocity)

    print(f"pattern: {len(find_lobes(df_pat))} lobes, {len(find_nulls(df_pat))} nulls on the grid")

    pat_csv = os.path.join(args.out_dir, "ula_pattern.csv")
    link_csv = os.path.join(args.out_dir, "ula_link.csv")
    df_pat.to_csv(pat_csv, index=False)
    df_link.to_csv(link_csv, index=False)
    print(f"\nSaved {pat_csv}")
    print(f"Saved {link_csv}")

    if args.plot:
        from plot_results import plot_pattern, plot_pattern_polar, plot_link_vs_range
        plot_pattern(df_pat, show=False)
        plot_pattern_polar(df_pat, show=False)
        plot_link_vs_range(df_link)

    return df_pat, df_link


if __name__ == "__main__":
    main()
