import argparse
import os
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(REPO_ROOT))

from prefix_tools import PrefixSum1D  # noqa: E402
from prefix_tools import backend as B  # noqa: E402
from prefix_tools.utils import load_cfg, select_device, to_list  # noqa: E402


def run_example(cfg: dict, backend: str = "python", device=None) -> list:
    values = B.from_list(cfg["values"], backend, device=device)
    ps = PrefixSum1D(values)

    prefix = to_list(ps.prefix())
    print(f"prefix array (n+1): {' '.join(str(x) for x in prefix)}")
    return prefix


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--yaml", type=str, default=os.path.join(REPO_ROOT, "prefix_tools.yml"))
    ap.add_argument("--config-key", type=str, default="prefix_sum")
    ap.add_argument("--backend", choices=list(B.BACKENDS), default="python")
    ap.add_argument("--force-cpu", action="store_true")
    args = ap.parse_args()

    cfg = load_cfg(args.yaml, args.config_key)
    device = select_device(args.force_cpu) if args.backend == "torch" else None
    run_example(cfg, backend=args.backend, device=device)


if __name__ == "__main__":
    main()
