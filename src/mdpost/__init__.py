"""mdpost - turn raw markdown drafts into blog posts with generated front matter.

Counts the prose words in a draft, derives a title and slug, writes the
post into a blog repository and optionally commits and pushes it.
"""

__version__ = "0.1.0"
