"""Console lines for match progress: moves, disqualifications, results."""

import datetime


def log_event(message):
    """Print MESSAGE prefixed with the wall-clock time, e.g. '[14:02:11] Move 3: Red a1-b2'."""
    timestamp = datetime.datetime.now().strftime("%H:%M:%S")
    print(f"[{timestamp}] {message}")
