"""Central module containing constants used for sampling and color handling"""

from __future__ import annotations

# Default sampling step in percent: 1 means 100 samples per segment
DEFAULT_STEP: float = 1.0

# A shift of PERCENT_FULL addresses the end of a curve, arc, spline or path
PERCENT_FULL: float = 100.0

# Number of decimals kept for an interpolated alpha channel
ALPHA_DECIMALS: int = 4

# Default alpha if a color does not carry one
DEFAULT_ALPHA: float = 1.0


def main():
    """Main"""
    print("DEFAULT_STEP:  ", DEFAULT_STEP)
    print("PERCENT_FULL:  ", PERCENT_FULL)
    print("ALPHA_DECIMALS:", ALPHA_DECIMALS)
    print("DEFAULT_ALPHA: ", DEFAULT_ALPHA)


if __name__ == "__main__":
    main()
