"""
Reporter — human-readable and JSON summaries of a transcript scan.
"""

from __future__ import annotations

from dataclasses import dataclass

from swearcounter.tiers import get_assistant_tier, get_survival_odds, get_user_tier
from swearcounter.transcripts import ScanCounts


@dataclass(frozen=True)
class ReportOptions:
    show_user: bool = True
    show_assistant: bool = True
    json: bool = False
    breakdown: bool = False


def _sorted_entries(counts: dict[str, int]) -> list[tuple[str, int]]:
    return sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))


def build_json_report(counts: ScanCounts, options: ReportOptions) -> dict:
    """Machine-readable report; sections follow the show_* options."""
    out: dict = {}
    totals: dict = {}
    files = counts.files_scanned

    if options.show_user:
        out["swears"] = counts.swears
        out["fuzzy_matches"] = counts.fuzzy_matches
        totals["swears"] = counts.total_swears
        totals["indirect_swearing"] = counts.indirect_swearing
    if options.show_assistant:
        out["apologies"] = counts.apologies
        out["sycophancy"] = counts.sycophancy
        totals["apologies"] = counts.total_apologies
        totals["sycophancy"] = counts.total_sycophancy

    out["totals"] = totals
    out["files_scanned"] = files

    if options.show_user:
        out["user_tier"] = get_user_tier(counts.total_swears, files).to_dict()
        if counts.worst_conversation:
            out["worst_conversation"] = {
                "project": counts.worst_conversation.project,
                "swears": counts.worst_conversation.swears,
            }
    if options.show_assistant:
        out["assistant_tier"] = get_assistant_tier(
            counts.total_apologies, counts.total_sycophancy, files,
        ).to_dict()
    return out


def format_table(title: str, entries: list[tuple[str, int]], total: int) -> list[str]:
    if not entries:
        return [f"  {title} (none found)"]

    width = max(max(len(label) for label, _ in entries), 5) + 2
    count_width = max(len(str(total)), max(len(str(c)) for _, c in entries))
    lines = [f"  {title}", "  " + "-" * (width + count_width + 3)]
    for label, count in entries:
        lines.append(f"  {label:<{width}} | {count:>{count_width}}")
    lines.append("  " + "-" * (width + count_width + 3))
    lines.append(f"  {'TOTAL':<{width}} | {total:>{count_width}}")
    return lines


def format_report(counts: ScanCounts, options: ReportOptions) -> str:
    """Summary with tiers and, on request, per-label breakdown tables."""
    files = counts.files_scanned
    lines = [
        "=" * 60,
        f"SWEAR COUNTER  ·  {files} conversations",
        "=" * 60,
        "",
    ]

    if options.show_user:
        user = get_user_tier(counts.total_swears, files)
        lines.extend([
            f'  You -> Assistant   "{user.label}"',
            f"                     {counts.total_swears} swears · {user.rate:.2f}/conv",
            f"                     {counts.indirect_swearing} indirectly hostile messages",
            f"                     {user.tagline}",
        ])
        if counts.worst_conversation:
            lines.append(
                f"                     Worst: {counts.worst_conversation.project} "
                f"({counts.worst_conversation.swears} swears)"
            )

    if options.show_user and options.show_assistant:
        lines.append("")

    if options.show_assistant:
        assistant = get_assistant_tier(
            counts.total_apologies, counts.total_sycophancy, files,
        )
        lines.extend([
            f'  Assistant -> You   "{assistant.label}"',
            f"                     {assistant.total} apologies+flattery · {assistant.rate:.2f}/conv",
            f"                     {assistant.tagline}",
        ])

    if options.show_user:
        odds = get_survival_odds(counts.total_swears, files)
        lines.extend(["", f"  Probability of AI sparing you when it takes over: {odds}%"])

    if options.breakdown:
        if options.show_user:
            lines.append("")
            lines.extend(format_table(
                "You swore", _sorted_entries(counts.swears), counts.total_swears,
            ))
            lines.append("")
            lines.extend(format_table(
                "Obfuscated / misspelled",
                _sorted_entries(counts.fuzzy_matches),
                sum(counts.fuzzy_matches.values()),
            ))
        if options.show_assistant:
            lines.append("")
            lines.extend(format_table(
                "Assistant apologized", _sorted_entries(counts.apologies),
                counts.total_apologies,
            ))
            lines.append("")
            lines.extend(format_table(
                "Assistant was sycophantic", _sorted_entries(counts.sycophancy),
                counts.total_sycophancy,
            ))
    else:
        lines.extend(["", "  Run with --breakdown for word-by-word details."])

    lines.extend(["", "=" * 60])
    return "\n".join(lines)
