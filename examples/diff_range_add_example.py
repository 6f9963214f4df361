import argparse
import os
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(REPO_ROOT))

from prefix_tools import DiffArray1D  # noqa: E402
from prefix_tools import backend as B  # noqa: E402
from prefix_tools.utils import load_cfg, plot_values, select_device, to_list  # noqa: E402


def run_example(cfg: dict, backend: str = "python", device=None, plot_path: str | None = None) -> list:
    diff = DiffArray1D(cfg["size"], backend=backend, device=device)
    for l, r, delta in cfg["updates"]:
        diff.range_add(l, r, delta)

    result = to_list(diff.build())
    print(f"final values: {' '.join(str(x) for x in result)}")

    if plot_path:
        plot_values(result, plot_path, title=f"Range adds on size {diff.size()}")
    return result


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--yaml", type=str, default=os.path.join(REPO_ROOT, "prefix_tools.yml"))
    ap.add_argument("--config-key", type=str, default="diff_range_add")
    ap.add_argument("--backend", choices=list(B.BACKENDS), default="python")
    ap.add_argument("--force-cpu", action="store_true")
    ap.add_argument("--plot", type=str, default=None, help="Save a plot of the final values to this PNG")
    args = ap.parse_args()

    cfg = load_cfg(args.yaml, args.config_key)
    device = select_device(args.force_cpu) if args.backend == "torch" else None
    run_example(cfg, backend=args.backend, device=device, plot_path=args.plot)


if __name__ == "__main__":
    main()
