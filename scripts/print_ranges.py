import os
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = ROOT / "src"
sys.path.insert(0, str(SRC_PATH))

from gcode.base_n import encode_numeral, group_numeral  # noqa: E402
from gcode.projection import format_distance, max_range_meters  # noqa: E402


def main() -> None:
    base = int(os.getenv("GCODE_BASE", "32"))
    precision = float(os.getenv("GCODE_PRECISION_METERS", "3"))
    length = int(os.getenv("GCODE_MAX_LENGTH", "7"))

    print(
        f"Maximum distance reachable per code length in base-{base} "
        f"with {precision:g}m precision."
    )
    for digits in range(1, length + 1):
        n = base**digits
        sample = group_numeral(encode_numeral(n - 1, base)) if base <= 36 else str(n - 1)
        reach = format_distance(max_range_meters(n, precision))
        print(f"{digits:>3} digits  {reach:>10}  (e.g. {sample})")


if __name__ == "__main__":
    main()
