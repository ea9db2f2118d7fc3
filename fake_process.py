# fake_process.py
"""
Fake process for profiler demos.

Prints a banner, then five times: prints a marker, spins a counter up to ten
billion, prints "Done" and sleeps five seconds. Takes no arguments.
"""
import sys
import time

# =================== CONFIGURATION & CONSTANTS ===================
REPEAT_COUNT = 5
SPIN_BOUND = 10_000_000_000  # literal count, not calibrated to wall time
PAUSE_SECONDS = 5

START_MESSAGE = "Starting our fake process..."
LOOP_MESSAGE = "Looping..."
DONE_MESSAGE = "Done"

INTERRUPTED_EXIT_CODE = 130
# =================================================================


def spin(bound=SPIN_BOUND):
    """Busy-wait until the counter reaches bound. Never yields."""
    counter = 0
    while counter < bound:
        counter += 1
    return counter


def fake_work(repeats=REPEAT_COUNT, bound=SPIN_BOUND, pause=PAUSE_SECONDS):
    for _ in range(repeats):
        print(LOOP_MESSAGE, flush=True)
        spin(bound)
        print(DONE_MESSAGE, flush=True)
        time.sleep(pause)


def main():
    try:
        print(START_MESSAGE, flush=True)
        fake_work()
    except KeyboardInterrupt:
        # stdout carries only the status lines
        print("\n⚠️ Ctrl+C detected, stopping fake process.", file=sys.stderr)
        return INTERRUPTED_EXIT_CODE
    return 0


if __name__ == "__main__":
    sys.exit(main())
