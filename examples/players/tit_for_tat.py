#!/usr/bin/env python3
"""
tit_for_tat.py — Prisoner's Dilemma player
==========================================

Cooperates first, then repeats whatever the opponent did last.

    duel-referee dilemma examples/players/tit_for_tat.py examples/players/always_defect.py
"""

import sys


def main():
    iters = int(sys.stdin.readline())
    move = "COOPERATE"
    for _ in range(iters):
        print(move, flush=True)
        move = sys.stdin.readline().strip()


if __name__ == "__main__":
    main()
