import argparse
import os
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(REPO_ROOT))

from prefix_tools import PrefixSum1D  # noqa: E402
from prefix_tools import backend as B  # noqa: E402
from prefix_tools.utils import load_cfg, log_results, select_device  # noqa: E402


def run_example(cfg: dict, backend: str = "python", device=None, log_csv: str | None = None) -> list:
    values = B.from_list(cfg["values"], backend, device=device)
    ps = PrefixSum1D(values)

    rows = []
    for l, r in cfg["queries"]:
        s = ps.range_sum(l, r)
        # numpy scalars and 0-d tensors both expose item()
        s = s.item() if hasattr(s, "item") else s
        print(f"sum[{l},{r}) = {s}")
        rows.append((l, r, s))

    if log_csv:
        log_results(rows, log_csv, header=("l", "r", "sum"))
    return rows


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--yaml", type=str, default=os.path.join(REPO_ROOT, "prefix_tools.yml"))
    ap.add_argument("--config-key", type=str, default="range_sum_queries")
    ap.add_argument("--backend", choices=list(B.BACKENDS), default="python")
    ap.add_argument("--force-cpu", action="store_true")
    ap.add_argument("--log-csv", type=str, default=None, help="Append query results to this CSV file")
    args = ap.parse_args()

    cfg = load_cfg(args.yaml, args.config_key)
    device = select_device(args.force_cpu) if args.backend == "torch" else None
    run_example(cfg, backend=args.backend, device=device, log_csv=args.log_csv)


if __name__ == "__main__":
    main()
