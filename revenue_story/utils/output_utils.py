import json
from pathlib import Path

from revenue_story.utils.logging_utils import done


# ============================================================
# Helpers
# ============================================================

def format_number_short(n: float) -> str:
    """
    Compact magnitude label: 50 -> "50", 1342 -> "1.3K", 2_500_000 -> "2.5M".
    Whole thousands drop the decimal ("2K", not "2.0K").
    """
    n = float(n)
    if abs(round(n)) < 1_000:
        return str(int(round(n)))
    # a value that rounds up to 1000 of one scale is shown in the next one
    for scale, suffix in ((1_000, "K"), (1_000_000, "M"), (1_000_000_000, "B")):
        v = round(n / scale, 1)
        if abs(v) < 1_000 or suffix == "B":
            break
    return f"{v:.0f}{suffix}" if v == int(v) else f"{v:.1f}{suffix}"


def format_pct(n: float) -> str:
    return f"{round(n):.0f}%"


# ============================================================
# JSON export
# ============================================================

def result_to_json(result, indent=2) -> str:
    return json.dumps(result.to_dict(), indent=indent, allow_nan=False)


def write_result_json(result, out_path, indent=2) -> Path:
    """Serialize a GenerationResult to `out_path`, creating parent folders."""
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(result_to_json(result, indent=indent) + "\n", encoding="utf-8")
    done(f"Wrote generation result: {out_path}")
    return out_path
