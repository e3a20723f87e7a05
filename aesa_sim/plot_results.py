# -*- coding: utf-8 -*-
"""
Created on Mon Feb  2 15:22:09 2026

@author: bboyg
"""

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt


def load_output(csv_path="ula_pattern.csv"):
    df = pd.read_csv(csv_path)
    return df


def plot_pattern(df, show=True):
    """Plot normalised array factor (dB) vs observation angle (degrees)."""
    th = df["theta_deg"].to_numpy()
    af_db = df["af_dB"].to_numpy()

    m = np.isfinite(af_db)

    fig, ax = plt.subplots(figsize=(9, 4))
    ax.plot(th[m], af_db[m])

    nulls = df["is_null"].to_numpy().astype(bool)
    if nulls.any():
        ax.plot(th[nulls], np.full(nulls.sum(), np.nanmin(af_db[m])), "x", label="Nulls")
        ax.legend()

    ax.set_xlabel("Observation angle (deg)")
    ax.set_ylabel("AF (dB, normalised)")
    ax.set_title("ULA array factor")
    ax.grid(True)

    if show:
        plt.show()
    return fig


def plot_pattern_polar(df, floor_db=-40.0, show=True):
    """Polar view of the pattern, clipped at floor_db."""
    th = df["theta_rad"].to_numpy()
    af_db = df["af_dB"].to_numpy()

    r = np.clip(np.nan_to_num(af_db, nan=floor_db), floor_db, 0.0) - floor_db

    fig = plt.figure()
    ax = fig.add_subplot(projection="polar")
    ax.plot(th, r)

    # broadside up
    ax.set_theta_zero_location("N")
    ax.set_theta_direction(-1)
    ax.set_thetamin(-90)
    ax.set_thetamax(90)
    ax.set_title(f"ULA array factor (dB above {floor_db:.0f})")

    if show:
        plt.show()
    return fig


def plot_link_vs_range(df, show=True):
    """Received power (dBW) vs range (km)."""
    r_km = df["range_m"].to_numpy() / 1000.0
    pr_db = df["received_power_dBW"].to_numpy()

    fig, ax = plt.subplots()
    ax.plot(r_km, pr_db, marker=".")
    ax.set_xlabel("Range (km)")
    ax.set_ylabel("Received power (dBW)")
    ax.set_title("Received power vs range")
    ax.grid(True)

    if show:
        plt.show()
    return fig
