import csv
import os

import numpy as np
import pandas as pd
import torch
import yaml
import matplotlib.pyplot as plt


def load_cfg(yaml_path: str, config_key: str) -> dict:
    with open(yaml_path, "r", encoding="utf-8") as f:
        all_cfg = yaml.safe_load(f)
    if config_key not in all_cfg:
        raise KeyError(f"Config key {config_key!r} not found in {yaml_path}")
    return all_cfg[config_key]


def select_device(force_cpu: bool = False) -> torch.device:
    """Accelerator for the torch backend, falling back to cpu."""
    if not force_cpu:
        for name in ("cuda", "xpu"):
            accel = getattr(torch, name, None)
            if accel is not None and accel.is_available():
                print(f"[INFO] torch backend on {name}: {accel.get_device_name(0)}")
                return torch.device(name)
    print("[INFO] torch backend on cpu")
    return torch.device("cpu")


def to_list(values) -> list:
    if isinstance(values, torch.Tensor):
        return values.detach().cpu().tolist()
    if isinstance(values, np.ndarray):
        return values.tolist()
    return list(values)


def log_results(rows, path="prefix_tools_logs/results.csv", header=("l", "r", "sum")):
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    write_header = not os.path.exists(path)
    with open(path, "a", newline="") as f:
        writer = csv.writer(f)
        if write_header:
            writer.writerow(header)
        for row in rows:
            writer.writerow(row)
    print(f"[INFO] Logged {len(rows)} rows to {path}")


def rolling_mean(series, window=3):
    # centered so the curve lines up with the step plot
    return series.rolling(max(1, int(window)), min_periods=1, center=True).mean()


def plot_values(values, save_path="prefix_tools_logs/values.png", window=3, title="Final values"):
    series = pd.Series(to_list(values), dtype="float64")
    if series.empty:
        print("[WARNING] Nothing to plot, sequence is empty")
        return None

    plt.figure(figsize=(8, 5))
    plt.step(series.index, series, where="mid", label="value")
    plt.plot(series.index, rolling_mean(series, window), label=f"rolling mean ({window})")

    plt.xlabel("Index")
    plt.ylabel("Value")
    plt.title(title)
    plt.legend()
    plt.grid(True)
    plt.tight_layout()

    parent = os.path.dirname(save_path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    plt.savefig(save_path, dpi=150)
    plt.close()

    print(f"[INFO] Plot saved to {save_path}")
    return save_path
