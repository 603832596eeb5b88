"""Commit and push a generated post with the git CLI.

Each step shells out to ``git`` inside the blog repository. Any failure
aborts the deploy; nothing is retried.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path, PurePosixPath

from mdpost.config import BlogConfig
from mdpost.errors import GitError
from mdpost.models import Post

logger = logging.getLogger(__name__)


def _run_git(args: list[str], cwd: Path, *, step: str) -> str:
    """Run one git command and return its stdout.

    Raises:
        GitError: If git is missing or exits non-zero.
    """
    cmd = ["git", *args]
    logger.debug("Running %s in %s", " ".join(cmd), cwd)

    try:
        result = subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=True,
            text=True,
        )
    except FileNotFoundError as exc:
        raise GitError(f"git not found, is it on the PATH? (step={step})") from exc

    if result.returncode != 0:
        raise GitError(
            f"git {step} failed (exit {result.returncode}): {result.stderr.strip()[:500]}"
        )
    return result.stdout.strip()


def post_repo_path(post: Post, config: BlogConfig) -> str:
    """Path of the post file relative to the repository root."""
    return str(PurePosixPath(Path(config.post_subdir).as_posix(), post.filename))


def deploy_post(post: Post, config: BlogConfig) -> str:
    """Stage, commit and push a written post.

    Args:
        post: The post already written by the publisher.
        config: Supplies the repository, author identity and remote.

    Returns:
        One-line summary of the new commit.

    Raises:
        GitError: If the repository is missing or any git step fails.
    """
    repo = config.repo_dir
    if not repo.is_dir():
        raise GitError(f"Blog repository not found: {repo}")

    logger.info("Deploying post %s", post.slug)

    postfile = post_repo_path(post, config)
    _run_git(["add", postfile], repo, step="add")
    logger.info("Added file %s", postfile)

    status = _run_git(["status", "--short"], repo, step="status")
    logger.info("Status:\n%s", status or "(clean)")

    author = f"{config.author} <{config.email}>"
    _run_git(
        ["commit", "-m", config.commit_message, f"--author={author}"],
        repo,
        step="commit",
    )
    commit = _run_git(["log", "-1", "--format=%h %an <%ae> %s"], repo, step="log")
    logger.info("Committed %s", commit)

    logger.info("Pushing to remote %s", config.remote)
    _run_git(["push", config.remote], repo, step="push")
    return commit
