#!/usr/bin/env python3
"""Report which cells of Braille text the decoder recognizes.

Reads Braille lines from stdin and writes a JSON object to stdout.
"""
import json
import sys
from collections import Counter
from typing import Any, Dict, Iterable

import numpy as np

from .cells import cell_to_dots, dot_matrix, is_cell, is_six_dot
from .decoder import tokenize
from .tables import DEFAULT_TABLES, BrailleTables


def count_cells(
    lines: Iterable[str], tables: BrailleTables = DEFAULT_TABLES
) -> Dict[str, "Counter[str]"]:
    used_cells: "Counter[str]" = Counter()
    unrecognized_cells: "Counter[str]" = Counter()

    for line_idx, line in enumerate(lines):
        line = line.strip()
        if not line:
            continue

        for char in line:
            if is_cell(char):
                used_cells[char] += 1

        _tokens, diagnostics = tokenize(line, tables, line_idx)
        for diagnostic in diagnostics:
            unrecognized_cells[diagnostic.text] += 1

    return {"used": used_cells, "unrecognized": unrecognized_cells}


def dot_totals(used_cells: "Counter[str]") -> Dict[str, int]:
    """Times each dot (1-6) is raised across the six-dot cells in *used_cells*."""
    six_dot = [char for char in used_cells if is_six_dot(char)]
    if not six_dot:
        return {str(dot): 0 for dot in range(1, 7)}

    weights = np.array([used_cells[char] for char in six_dot], dtype=np.int64)
    totals = (dot_matrix(six_dot) * weights.reshape(-1, 1)).sum(axis=0)

    return {str(dot): int(total) for dot, total in enumerate(totals, start=1)}


def _describe(counts: "Counter[str]") -> Dict[str, Any]:
    return {
        char: {
            "count": count,
            "hex": f"\\u{ord(char):04x}",
            "dots": cell_to_dots(char) if is_cell(char) else None,
        }
        for char, count in counts.most_common()
    }


def main() -> None:
    counts = count_cells(sys.stdin)

    if counts["unrecognized"]:
        print(
            "Unrecognized", len(counts["unrecognized"]), "cell(s)", file=sys.stderr
        )

    report: Dict[str, Any] = {
        key: _describe(value) for key, value in counts.items()
    }
    report["dots"] = dot_totals(counts["used"])

    json.dump(
        report,
        sys.stdout,
        ensure_ascii=False,
    )


# -----------------------------------------------------------------------------

if __name__ == "__main__":
    main()
