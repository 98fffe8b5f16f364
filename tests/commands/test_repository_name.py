"""Tests for deriving the clone directory name from a URL."""

import pytest

from gwt.cli.commands.init import is_plain_directory_name, repository_name_from_url


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("https://example.com/group/repo.git", "repo"),
        ("https://example.com/group/repo", "repo"),
        ("https://example.com/group/repo/", "repo"),
        ("git@github.com:acme/app.git", "app"),
        ("git@github.com:app.git", "app"),
        ("/local/path/project.git", "project"),
        ("repo.git.git", "repo.git"),
    ],
)
def test_repository_name_from_url(url: str, expected: str) -> None:
    assert repository_name_from_url(url) == expected


def test_url_ending_in_git_suffix_only_gives_empty_name() -> None:
    assert repository_name_from_url("https://example.com/.git") == ""


@pytest.mark.parametrize("name", ["app", "my-repo", "repo.git", ".dotfiles"])
def test_plain_directory_names_are_accepted(name: str) -> None:
    assert is_plain_directory_name(name)


@pytest.mark.parametrize("name", ["", ".", "..", "a/b", "a\\b"])
def test_names_escaping_the_project_root_are_rejected(name: str) -> None:
    assert not is_plain_directory_name(name)


@pytest.mark.parametrize(
    "url",
    ["https://example.com/group/..", "https://example.com/group/.", "https://example.com/..git"],
)
def test_dot_urls_derive_unsafe_names(url: str) -> None:
    assert not is_plain_directory_name(repository_name_from_url(url))
