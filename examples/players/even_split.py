#!/usr/bin/env python3
"""
even_split.py — Tug of War player
=================================

Spreads its energy evenly over the remaining iterations.
"""

import sys


def main():
    energy = int(sys.stdin.readline())
    iters = int(sys.stdin.readline())
    for left in range(iters, 0, -1):
        spend = energy // left
        energy -= spend
        print(spend, flush=True)
        sys.stdin.readline()


if __name__ == "__main__":
    main()
