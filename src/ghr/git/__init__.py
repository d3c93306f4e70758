"""Git integration module for ghr."""

from ghr.git.client import GitClient
from ghr.git.path_resolver import PartialPath, resolve_path
from ghr.git.scanner import RepositoryScanner
from ghr.git.url_resolver import URLResolver

__all__ = ["GitClient", "PartialPath", "RepositoryScanner", "URLResolver", "resolve_path"]
