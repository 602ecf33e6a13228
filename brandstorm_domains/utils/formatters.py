"""
Text Formatting Utilities for tool output
"""
from typing import List, Optional

HEADER_RULE = "=" * 25
SECTION_RULE = "-" * 15


def format_score(score: float) -> str:
    """Format a score without a trailing ``.0``

    Args:
        score: Score value

    Returns:
        ``7`` for 7.0, ``7.5`` for 7.5
    """
    return f"{score:g}"


def format_price(price: Optional[float]) -> str:
    """Format a premium price with thousands separators"""
    if price is None:
        return ""
    if float(price).is_integer():
        return f"${int(price):,}"
    return f"${price:,.2f}"


def status_label(available: bool, is_premium: bool) -> str:
    if is_premium:
        return "✓ PREMIUM" if available else "✗ PREMIUM (TAKEN)"
    return "✓ AVAILABLE" if available else "✗ TAKEN"


def format_domain_status(domain: str, available: bool, is_premium: bool) -> str:
    """One-line status for a single checked domain"""
    return f"{domain} is {status_label(available, is_premium)}"


def _section(title: str, lines: List[str]) -> str:
    if not lines:
        return ""
    return f"{title}\n{SECTION_RULE}\n" + "".join(f"{line}\n" for line in lines) + "\n"


def format_search_result(result) -> str:
    """Render a SearchResult as the suggest-domains text block"""
    output = f"DOMAIN SUGGESTIONS\n{HEADER_RULE}\n\n"

    output += _section(
        "AVAILABLE DOMAINS",
        [f"✓ {r.domain} (Score: {format_score(r.score)}/10)" for r in result.available]
    )

    premium_lines = []
    for r in result.premium:
        line = f"★ {r.domain}"
        if r.premium_price:
            line += f" ({format_price(r.premium_price)})"
        premium_lines.append(line)
    output += _section("PREMIUM DOMAINS", premium_lines)

    output += _section("TAKEN DOMAINS", [f"✗ {r.domain}" for r in result.taken])
    output += _section("INSIGHTS", [f"• {insight}" for insight in result.insights])

    return output


def format_quick_result(result) -> str:
    """Compact rendering used by quick-suggest"""
    output = f"QUICK DOMAIN SUGGESTIONS\n{HEADER_RULE}\n\n"

    if result.available:
        output += "AVAILABLE:\n"
        output += "".join(f"✓ {r.domain}\n" for r in result.available)
        output += "\n"

    if result.taken:
        output += "TAKEN:\n"
        output += "".join(f"✗ {r.domain}\n" for r in result.taken)

    if not result.available and not result.taken:
        output += "No suggestions could be checked.\n"

    return output


def format_batch_results(results) -> str:
    """Availability block for a list of checked domains"""
    output = f"DOMAIN AVAILABILITY\n{HEADER_RULE}\n\n"
    output += "".join(
        f"{format_domain_status(r.domain, r.available, r.is_premium)}\n"
        for r in results
    )
    available = sum(1 for r in results if r.available)
    output += f"\n{available} of {len(results)} domains available\n"
    return output


def format_deep_result(result) -> str:
    """Render a DeepTldResult"""
    output = f"DEEP TLD EXPLORATION\n{HEADER_RULE}\n\n"

    output += _section(
        "STANDOUT DOMAINS",
        [
            f"★ {s.domain} (Score: {format_score(s.score)}/10) - {s.reason}"
            for s in result.standouts
        ]
    )

    available_lines = []
    for r in result.available:
        line = f"✓ {r.domain} (Score: {format_score(r.score)}/10)"
        if r.is_premium and r.premium_price:
            line += f" ({format_price(r.premium_price)})"
        available_lines.append(line)
    output += _section("AVAILABLE STANDOUTS", available_lines)

    output += _section("EXPLORATION STATS", [f"• {line}" for line in result.stats])

    return output
