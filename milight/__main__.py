#!/usr/bin/env python3

import signal
import sys


def handler(signum, frame):
    sys.exit(1)


if __name__ == "__main__":
    from milight.console.application import main

    signal.signal(signal.SIGINT, handler)

    sys.exit(main())
