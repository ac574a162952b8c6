"""Allow ``python -m strsim``."""

from strsim.cli import run

if __name__ == "__main__":
    run()
