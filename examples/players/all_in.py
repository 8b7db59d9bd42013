#!/usr/bin/env python3
"""Tug of War player that spends everything on the first iteration."""

import sys


def main():
    energy = int(sys.stdin.readline())
    iters = int(sys.stdin.readline())
    for _ in range(iters):
        print(energy, flush=True)
        energy = 0
        sys.stdin.readline()


if __name__ == "__main__":
    main()
