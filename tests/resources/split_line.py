"""Sends one line in two halves with a pause in between."""
import sys
import time

sys.stdout.write("COOP")
sys.stdout.flush()
time.sleep(0.5)
sys.stdout.write("ERATE\n")
sys.stdout.flush()

for _ in sys.stdin:
    pass
