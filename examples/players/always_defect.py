#!/usr/bin/env python3
"""Prisoner's Dilemma player that defects every time."""

import sys


def main():
    iters = int(sys.stdin.readline())
    for _ in range(iters):
        print("DEFECT", flush=True)
        sys.stdin.readline()


if __name__ == "__main__":
    main()
