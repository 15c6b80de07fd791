"""Simple entrypoint to run the evaluation scenarios locally."""

from evaluation.harness import run_smoke_checks
from stylist_app.logging_config import configure_logging


def main() -> None:
    configure_logging("WARNING")
    for line in run_smoke_checks():
        print(line)


if __name__ == "__main__":
    main()
