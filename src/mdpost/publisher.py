"""Plain markdown publisher: front matter plus the untouched draft."""

from __future__ import annotations

import logging
from pathlib import Path

from mdpost.config import BlogConfig
from mdpost.errors import PublishError
from mdpost.models import Post

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class MarkdownPublisher:
    """Writes a post as markdown with a fixed-key front matter block."""

    def format_frontmatter(self, post: Post) -> str:
        lines: list[str] = ["---"]
        lines.append(f'title: "{post.title}"')
        lines.append(f"author: {post.author}")
        lines.append(f"slug: {post.slug}")
        lines.append(f'date: "{post.timestamp.strftime(DATE_FORMAT)}"')
        lines.append(f"wcount: {post.word_count}")
        lines.append("---")
        return "\n".join(lines) + "\n"

    def format_post(self, post: Post) -> str:
        """Front matter, a blank line, then every original line in order."""
        body = "".join(f"{line}\n" for line in post.lines)
        return self.format_frontmatter(post) + "\n" + body

    def output_path(self, config: BlogConfig, slug: str) -> Path:
        return config.post_dir / f"{slug}.md"

    def write(self, post: Post, config: BlogConfig) -> Path:
        """Write the post into the configured post directory.

        Returns:
            Path of the written file.

        Raises:
            PublishError: If the file cannot be created or written.
        """
        path = self.output_path(config, post.slug)
        logger.info("Generating front matter for %s", post.slug)
        content = self.format_post(post)
        try:
            path.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise PublishError(f"Cannot write post to {path}: {exc}") from exc
        logger.info("Wrote post to %s", path)
        return path
