#!/usr/bin/env python3
"""
Print the steps of a fade between two colors.
"""

from arcmap.color import ColorUtils


def main():
    """Main"""
    start = "#3366ff"
    end = "rgba(255,102,0,0.25)"
    print(f"Fading from {start} to {end}:")
    for shift in range(0, 101, 20):
        print(f"  {shift:3d}%: {ColorUtils.interpolate_color(start, end, shift)}")


if __name__ == "__main__":
    main()
