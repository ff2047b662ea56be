import sys

from edw_dumper import RUN_ID, PrintLogger, plan_dump, run_config, run_dump

__all__ = [
    "RUN_ID",
    "PrintLogger",
    "plan_dump",
    "run_config",
    "run_dump",
]


if __name__ == "__main__":
    run_config(sys.argv[1], dry_run="--dry-run" in sys.argv[2:])
