"""Entry point for running categorical-axis as a module.

Usage:
    python -m categorical_axis [options] CATEGORIES...
"""

from categorical_axis.cli import main


if __name__ == "__main__":
    main()
