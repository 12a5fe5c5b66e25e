"""Run the tago checks: ruff formatting and linting, then the pytest suite."""

import argparse
import subprocess
import sys


def run_step(command: list[str], step_name: str) -> None:
    """Run one check and stop the whole run when it fails."""
    print(f"\n--- {step_name} ---")
    print(f"$ {' '.join(command)}")
    result = subprocess.run(command, check=False)
    if result.returncode != 0:
        print(f"\n❌ {step_name} failed (exit {result.returncode})")
        sys.exit(result.returncode)


def main() -> None:
    """Format and lint the package, then run the tests.

    With --ci nothing is rewritten: formatting is only checked.
    """
    parser = argparse.ArgumentParser(description="Run tago development checks.")
    parser.add_argument(
        "--ci", action="store_true", help="Check only, do not rewrite files"
    )
    args = parser.parse_args()

    paths = ["tago", "tests", "dev.py"]
    if args.ci:
        run_step(["ruff", "format", "--check", *paths], "Ruff format check")
        run_step(["ruff", "check", *paths], "Ruff lint")
    else:
        run_step(["ruff", "format", *paths], "Ruff format")
        run_step(["ruff", "check", "--fix", *paths], "Ruff lint and fix")

    run_step([sys.executable, "-m", "pytest"], "Tests")

    print("\n✅ tago checks passed.")


if __name__ == "__main__":
    main()
