"""
Render component - tag tree to <meta> markup.

Output order is deterministic:
1. bare description
2. og:* entries in insertion order (attributes right after their parent)
3. Twitter block (title/description fallbacks, explicit twitter:* entries,
   image fallback)
"""

from ._impl import META_TEMPLATE, TagRenderer, render_meta_tag

__all__ = [
    "META_TEMPLATE",
    "TagRenderer",
    "render_meta_tag",
]
