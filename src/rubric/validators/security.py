"""セキュリティ系バリデータ。"""

import re
from typing import Any

from rubric.models.element import InspectableElement
from rubric.models.report import CheckOutcome
from rubric.validators.common import leading_float, leading_int

DANGEROUS_PATTERNS: list[re.Pattern[str]] = [
    re.compile(r"<script[^>]*>", re.IGNORECASE),
    re.compile(r"javascript:", re.IGNORECASE),
    re.compile(r"on\w+\s*=", re.IGNORECASE),
    re.compile(r"<iframe[^>]*>", re.IGNORECASE),
    re.compile(r"eval\s*\(", re.IGNORECASE),
    re.compile(r"document\.write", re.IGNORECASE),
]

_CLICKJACKING_MIN_OPACITY = 0.1
_CLICKJACKING_MAX_Z_INDEX = 9999


def check_xss(element: InspectableElement, rule: Any) -> CheckOutcome:
    """危険なマークアップや未エスケープHTMLの注入を検出する。"""
    inner_html = element.inner_html
    text_content = element.text_content

    has_dangerous_content = any(
        pattern.search(inner_html) or pattern.search(text_content) for pattern in DANGEROUS_PATTERNS
    )
    uses_unescaped_html = bool(element.framework_props().get("dangerouslySetInnerHTML"))
    passed = not has_dangerous_content and not uses_unescaped_html

    return CheckOutcome(
        passed=passed,
        message=(
            "No XSS vulnerabilities detected"
            if passed
            else "Potential XSS vulnerability: unsafe content or dangerouslySetInnerHTML usage"
        ),
        details={
            "dangerousPatterns": [p.pattern for p in DANGEROUS_PATTERNS if p.search(inner_html)],
            "usesDangerouslySetInnerHTML": uses_unescaped_html,
            "innerHTML": inner_html[:100],
        },
    )


def check_clickjacking(element: InspectableElement, rule: Any) -> CheckOutcome:
    tag_name = element.tag_name.upper()
    clickable = tag_name in ("BUTTON", "A") or element.get_attribute("role") == "button"
    if not clickable:
        return CheckOutcome(passed=True, message="Element not clickable")

    opacity = leading_float(element.computed_style("opacity"))
    visibility = element.computed_style("visibility")
    display = element.computed_style("display")
    position = element.computed_style("position")
    z_index = leading_int(element.computed_style("z-index")) or 0

    suspicious = (
        (opacity is not None and opacity < _CLICKJACKING_MIN_OPACITY)
        or visibility == "hidden"
        or display == "none"
        or (position == "absolute" and z_index > _CLICKJACKING_MAX_Z_INDEX)
    )

    return CheckOutcome(
        passed=not suspicious,
        message=(
            "Suspicious styling detected - potential clickjacking vector"
            if suspicious
            else "No clickjacking vulnerabilities detected"
        ),
        details={
            "opacity": opacity,
            "visibility": visibility,
            "display": display,
            "position": position,
            "zIndex": z_index,
        },
    )


def check_external_links(element: InspectableElement, rule: Any) -> CheckOutcome:
    """外部リンクのHTTPS利用と target="_blank" 時の rel 属性を確認する。"""
    if element.tag_name.upper() != "A":
        return CheckOutcome(passed=True, message="Not a link element")

    href = element.get_attribute("href")
    target = element.get_attribute("target")
    rel = element.get_attribute("rel") or ""

    if not href or href.startswith("#") or href.startswith("/"):
        return CheckOutcome(passed=True, message="Internal link")

    external = href.startswith("http") and element.document.hostname not in href
    if not external:
        return CheckOutcome(passed=True, message="Not an external link")

    has_noopener = "noopener" in rel
    has_noreferrer = "noreferrer" in rel
    opens_in_new_tab = target == "_blank"
    secure = href.startswith("https://")
    passed = secure and (not opens_in_new_tab or (has_noopener and has_noreferrer))

    return CheckOutcome(
        passed=passed,
        message=(
            "External link is secure"
            if passed
            else 'External link security issues: use HTTPS and rel="noopener noreferrer" for target="_blank"'
        ),
        details={
            "href": href,
            "isSecure": secure,
            "hasNoopener": has_noopener,
            "hasNoreferrer": has_noreferrer,
            "opensInNewTab": opens_in_new_tab,
        },
    )
