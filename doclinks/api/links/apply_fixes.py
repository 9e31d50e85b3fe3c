"""Write auto-fixable link repairs into document text."""

from .LinkIssue import LinkIssue
from .mask_code_blocks import mask_code_blocks


def apply_fixes(content: str, issues: list[LinkIssue]) -> tuple[str, list[LinkIssue]]:
    """Replace the href of each auto-fixable link, leaving code blocks untouched.

    Each issue rewrites the first remaining occurrence of its exact
    ``[text](href)`` source, so repeated identical links are fixed one per issue.

    Returns:
        The updated content and the issues that were applied
    """
    masked, restore = mask_code_blocks(content)
    applied: list[LinkIssue] = []

    for issue in issues:
        if not issue.is_fixable:
            continue
        old_link = issue.link.markdown
        if old_link not in masked:
            continue
        masked = masked.replace(old_link, issue.link.with_href(issue.suggested_fix), 1)
        applied.append(issue)

    return restore(masked), applied
