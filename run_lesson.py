import logging

from colwise.lesson import run_lesson

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
)

if __name__ == "__main__":
    results = run_lesson()

    # Non-zero exit when any snippet failed
    raise SystemExit(int(not all(result.ok for result in results)))
