from pathlib import Path
import sys

# Ensure project root on sys.path for direct script execution
root = Path(__file__).resolve().parents[1]
if str(root) not in sys.path:
    sys.path.insert(0, str(root))

from metricreport.cli.main import main


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
