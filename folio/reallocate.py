# folio/reallocate.py
"""Fit existing content blocks into a template's slots by size.

Greedy best-fit: the largest slot picks first, each slot taking the block
whose weight is closest to its target. Blocks are only ever reordered.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Set, Tuple

from .model import ContentBlock
from .util.stable_id import slugify

# (title, body) starter content, one per slot for up to seven slots.
DEFAULT_SECTION_TEMPLATES: Tuple[Tuple[str, str], ...] = (
    ("Announcements",
     "- Welcome back to a new week!\n- Assembly on Wednesday at 10am.\n- Field trip forms due Friday."),
    ("Homework",
     "- Math: Workbook p. 52 (#1-10)\n- Reading: 20 minutes from your library book\n- Science: Finish lab sheet"),
    ("Upcoming Events",
     "| Date | Event |\n| ---- | ----- |\n| Thu  | Art Showcase |\n| Fri  | School Play Rehearsal |\n"
     "| Mon  | Quiz: Fractions |"),
    ("Class Highlights",
     "**This Week:**\n\n- Great teamwork during group science experiments.\n"
     "- Creative story starters shared on Tuesday.\n- Improved quiet reading focus, keep it up!"),
    ("Student Shoutouts",
     "- Alex for helping a classmate.\n- Priya for outstanding math problem solving.\n"
     "- Jordan for a creative art project idea."),
    ("Reminders",
     "- Bring a water bottle daily.\n- Return library books by Thursday.\n- Wear sneakers for PE tomorrow."),
    ("Looking Ahead",
     "Next week we begin our **ecosystems** unit.\nStart thinking about an animal you'd like to research!"),
)


def block_weight(block: ContentBlock) -> int:
    """Approximate rendered size: characters of title and body."""
    return len(f"{block.title} {block.body}".strip())


def reallocate_content(blocks: Sequence[ContentBlock], size_targets: Optional[Sequence[int]]) -> List[ContentBlock]:
    """Permute `blocks` so longer content lands in larger slots.

    Returns the input order untouched when there are no targets or the
    counts differ.
    """
    if not size_targets or len(size_targets) != len(blocks):
        return list(blocks)

    weights = [block_weight(b) for b in blocks]
    # sorted() is stable: equal targets keep slot order.
    slot_order = sorted(range(len(size_targets)), key=lambda i: -size_targets[i])

    assigned: Dict[int, int] = {}  # slot -> block index
    used: Set[int] = set()
    for slot in slot_order:
        target = size_targets[slot]
        best: Optional[int] = None
        best_diff = 0
        for bi, w in enumerate(weights):
            if bi in used:
                continue
            diff = abs(w - target)
            if best is None or diff < best_diff:
                best, best_diff = bi, diff
        if best is not None:
            assigned[slot] = best
            used.add(best)

    leftovers = [bi for bi in range(len(blocks)) if bi not in used]
    for slot in range(len(size_targets)):
        if slot not in assigned and leftovers:
            assigned[slot] = leftovers.pop(0)

    return [blocks[assigned[slot]] for slot in range(len(size_targets))]


def _unique_id(base: str, taken: Set[str]) -> str:
    if base not in taken:
        return base
    n = 2
    while f"{base}-{n}" in taken:
        n += 1
    return f"{base}-{n}"


def seed_blocks(count: int = len(DEFAULT_SECTION_TEMPLATES)) -> List[ContentBlock]:
    """Starter blocks with slug ids derived from their titles."""
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    taken: Set[str] = set()
    out: List[ContentBlock] = []
    for i in range(count):
        if i < len(DEFAULT_SECTION_TEMPLATES):
            title, body = DEFAULT_SECTION_TEMPLATES[i]
        else:
            title, body = f"Section {i + 1}", "- Your content here"
        block_id = _unique_id(slugify(title) or f"section-{i + 1}", taken)
        taken.add(block_id)
        out.append(ContentBlock(id=block_id, title=title, body=body))
    return out


def set_block_count(blocks: Sequence[ContentBlock], count: int) -> List[ContentBlock]:
    """Grow with empty blocks or drop trailing ones until len == count."""
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    if count <= len(blocks):
        return list(blocks[:count])
    taken = {b.id for b in blocks}
    out = list(blocks)
    while len(out) < count:
        block_id = _unique_id(f"section-{len(out) + 1}", taken)
        taken.add(block_id)
        out.append(ContentBlock(id=block_id))
    return out


__all__ = [
    "DEFAULT_SECTION_TEMPLATES",
    "block_weight",
    "reallocate_content",
    "seed_blocks",
    "set_block_count",
]
