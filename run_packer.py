"""
run_packer.py - CLI Entry Point

This script serves as the command-line interface entry point for the
flipbook packer. It forwards execution to the CLI logic defined in
`src/flipbook_packer/cli.py`.

Usage:
    python run_packer.py pack --sequence f1.png f2.png --out atlas.png

This wrapper allows you to run the tool directly without needing to
modify PYTHONPATH or install the project as a package.

For help on available options, run:
    python run_packer.py --help
"""
import sys
from pathlib import Path

# Source code in src/ subdirectory
sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

import flipbook_packer.cli as fp_cli

if __name__ == "__main__":
    sys.exit(fp_cli.main())
