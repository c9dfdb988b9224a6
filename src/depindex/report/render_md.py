from __future__ import annotations

from typing import Any


def _cell(text: str) -> str:
    return text.replace("|", "\\|")


def _key_list(keys: list[str]) -> str:
    if not keys:
        return "-"
    return ", ".join(f"`{_cell(key)}`" for key in keys)


def render_markdown(summary: dict[str, Any]) -> str:
    totals = summary["totals"]
    rows = summary["keys"]

    lines: list[str] = []
    lines.append("# Dependency Report")
    lines.append("")
    lines.append("## Overview")
    lines.append("")
    lines.append(f"- description: {summary['description'] or '(none)'}")
    lines.append(f"- pairs: {totals['pairs']}")
    lines.append(f"- keys: {totals['keys']}")
    lines.append(f"- roots: {_key_list(summary['roots'])}")
    lines.append(f"- leaves: {_key_list(summary['leaves'])}")
    lines.append(f"- self_loops: {_key_list(summary['self_loops'])}")
    lines.append("")
    lines.append("## Keys")
    lines.append("")
    if rows:
        lines.append("| key | dependees | dependents | depends on | depended on by |")
        lines.append("|---|---:|---:|---|---|")
        for row in rows:
            lines.append(
                f"| {_cell(row['key'])} | {row['dependee_count']} | {row['dependent_count']} | "
                f"{_key_list(row['dependees'])} | {_key_list(row['dependents'])} |"
            )
    else:
        lines.append("No dependencies.")
    lines.append("")
    return "\n".join(lines)
