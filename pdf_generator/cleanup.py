"""
DOM cleanup pass applied to a loaded page before PDF export.

Tailwind min-height utilities (min-h-[297mm] and friends) size screen
page containers to a full sheet, which in print produces trailing blank
pages. The rules here are plain data: each names a selector, inline style
overrides to force on every match, and optionally a class-name pattern to
strip. The pipeline evaluates whatever rule list it is given.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

# Bracket-valued minimum-height utility, e.g. min-h-[297mm]
MIN_HEIGHT_CLASS_PATTERN = r"min-h-\[[^\]]+\]"


@dataclass(frozen=True)
class CleanupRule:
    """A selector plus the inline overrides to apply to every match."""

    selector: str
    styles: Dict[str, str] = field(default_factory=dict)
    strip_class_pattern: Optional[str] = None

    def to_js(self) -> Dict[str, Any]:
        """Serialize for page.evaluate()."""
        return {
            "selector": self.selector,
            "styles": dict(self.styles),
            "stripClassPattern": self.strip_class_pattern,
        }


DEFAULT_CLEANUP_RULES: List[CleanupRule] = [
    CleanupRule(
        selector="*",
        styles={"min-height": "0"},
        strip_class_pattern=MIN_HEIGHT_CLASS_PATTERN,
    ),
    CleanupRule(
        selector=".no-break, .page-break-inside-avoid",
        styles={"page-break-inside": "avoid", "break-inside": "avoid"},
    ),
]

# Returns the number of elements touched across all rules.
CLEANUP_SCRIPT = """
(rules) => {
  let touched = 0;
  for (const rule of rules) {
    const pattern = rule.stripClassPattern ? new RegExp(rule.stripClassPattern, 'g') : null;
    document.querySelectorAll(rule.selector).forEach((el) => {
      for (const [prop, value] of Object.entries(rule.styles)) {
        el.style.setProperty(prop, value);
      }
      // SVG elements expose className as an SVGAnimatedString
      if (pattern && typeof el.className === 'string' && el.className) {
        el.className = el.className.replace(pattern, '').replace(/\\s+/g, ' ').trim();
      }
      touched += 1;
    });
  }
  return touched;
}
"""


def serialize_rules(rules: Sequence[CleanupRule]) -> List[Dict[str, Any]]:
    return [rule.to_js() for rule in rules]


async def apply_cleanup_rules(page, rules: Optional[Sequence[CleanupRule]] = None) -> int:
    """
    Run the cleanup rules inside the page.

    Args:
        page: Playwright page with the document already loaded
        rules: Rules to apply (defaults to DEFAULT_CLEANUP_RULES)

    Returns:
        Number of elements touched
    """
    if rules is None:
        rules = DEFAULT_CLEANUP_RULES
    return await page.evaluate(CLEANUP_SCRIPT, serialize_rules(rules))
