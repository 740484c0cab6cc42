# progress.py

import argparse
import random
import time

from termline import Terminal

FILES = ["archive.tar.gz", "dataset.csv", "model.bin"]

def main():
    parser = argparse.ArgumentParser(description='termline progress demo')
    parser.add_argument('--clear',
        action='store_true',
        help='Erase the live block when done')
    parser.add_argument('--enable-logging',
        action='store_true',
        help='Enable debug logging')
    parser.add_argument('--log-file',
        help='Log file path (use "-" for stderr)')
    args = parser.parse_args()

    term = Terminal(logging_enabled=args.enable_logging, log_file=args.log_file)
    term.println("Downloading", "cyan", None, ["bold"])

    progress = {name: 0 for name in FILES}
    with term.live(len(FILES), leave_content=not args.clear) as block:
        while any(p < 100 for p in progress.values()):
            for index, name in enumerate(FILES):
                progress[name] = min(100, progress[name] + random.randint(0, 15))
                color = 'green' if progress[name] == 100 else 'yellow'
                block.update(index, f"{name:<16} {term.colorize(f'{progress[name]:3d}%', color)}")
            time.sleep(0.1)

    for step in range(0, 101, 20):
        term.overwrite(f"Verifying... {step}%")
        time.sleep(0.1)
    term.newline()
    term.println("Done", "brightGreen")

if __name__ == "__main__":
    main()
