"""Parameter file parsing utilities."""

from pathlib import Path
from typing import Any


_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


def parse_params(param_file: str | Path) -> dict[str, Any]:
    """
    Parse params.txt file.

    Numeric values are parsed as float first, then cast where needed.
    Blank lines and lines starting with '#' are skipped.

    Args:
        param_file: Path to the parameters file

    Returns:
        Dictionary of parameter name -> value
    """
    params = {}
    with open(param_file) as f:
        for line in f:
            if line.lstrip().startswith("#"):
                continue
            if "=" in line:
                name, value = line.split("=", 1)
                name = name.strip()
                value = value.strip()
                try:
                    params[name] = float(value)
                except ValueError:
                    params[name] = value
    return params


def as_bool(value: Any) -> bool:
    """Interpret a parsed parameter value as a boolean."""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    text = str(value).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ValueError(f"Cannot interpret {value!r} as a boolean")


def get_translation_params(params: dict) -> dict:
    """Extract translation parameters from parsed params dict."""
    gap = params.get("GAP")
    return {
        "table_id": int(params.get("TABLE_ID", 1)),
        "stop_sign": str(params.get("STOP_SIGN", "*")),
        "to_stop": as_bool(params.get("TO_STOP", False)),
        "cds": as_bool(params.get("CDS", False)),
        "gap": str(gap) if gap not in (None, "") else None,
    }


def get_output_params(params: dict) -> dict:
    """Extract output formatting parameters from parsed params dict."""
    line_width = int(params.get("LINE_WIDTH", 60))
    if line_width < 0:
        raise ValueError(f"LINE_WIDTH must be zero or positive, got {line_width}")
    return {
        "line_width": line_width,
    }
