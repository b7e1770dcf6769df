"""npm package naming rules.

The generated project's directory name doubles as its ``package.json``
name, so it has to satisfy the rules npm applies to new packages.
Violations come in two flavors, matching npm: errors (never allowed)
and warnings (allowed for legacy packages, not for new ones).
"""

import re
from dataclasses import dataclass, field
from urllib.parse import quote

MAX_LENGTH = 214

BLACKLIST = frozenset({"node_modules", "favicon.ico"})

NODE_BUILTINS = frozenset(
    {
        "assert", "async_hooks", "buffer", "child_process", "cluster", "console",
        "constants", "crypto", "dgram", "diagnostics_channel", "dns", "domain",
        "events", "fs", "http", "http2", "https", "inspector", "module", "net",
        "os", "path", "perf_hooks", "process", "punycode", "querystring",
        "readline", "repl", "stream", "string_decoder", "sys", "timers", "tls",
        "trace_events", "tty", "url", "util", "v8", "vm", "wasi",
        "worker_threads", "zlib",
    }
)  # fmt: skip

_SCOPED = re.compile(r"^(?:@([^/]+?)[/])?([^/]+?)$")
_SPECIAL = re.compile(r"[~'!()*]")


def _url_safe(value: str) -> bool:
    # Same escaping set as JavaScript's encodeURIComponent
    return quote(value, safe="!*'()") == value


@dataclass
class NameCheck:
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def valid_for_new_packages(self) -> bool:
        return not self.errors and not self.warnings

    @property
    def issues(self) -> list[str]:
        return [*self.errors, *self.warnings]


def check_package_name(name) -> NameCheck:
    """Check ``name`` against npm's naming rules.

    Examples:
        >>> check_package_name("my-app").valid_for_new_packages
        True
        >>> check_package_name("My App").issues
        ['name can only contain URL-friendly characters', 'name can no longer contain capital letters']
    """
    result = NameCheck()

    if name is None:
        result.errors.append("name cannot be null")
        return result
    if not isinstance(name, str):
        result.errors.append("name must be a string")
        return result

    if not name:
        result.errors.append("name length must be greater than zero")
    if name.startswith("."):
        result.errors.append("name cannot start with a period")
    if name.startswith("_"):
        result.errors.append("name cannot start with an underscore")
    if name.strip() != name:
        result.errors.append("name cannot contain leading or trailing spaces")
    if name.lower() in BLACKLIST:
        result.errors.append(f"{name} is not a valid package name")

    if name in NODE_BUILTINS:
        result.warnings.append(f"{name} is a core module name")
    if len(name) > MAX_LENGTH:
        result.warnings.append(f"name can no longer contain more than {MAX_LENGTH} characters")
    if name.lower() != name:
        result.warnings.append("name can no longer contain capital letters")
    if _SPECIAL.search(name.split("/")[-1]):
        result.warnings.append('name can no longer contain special characters ("~\'!()*")')

    if name and not _url_safe(name):
        match = _SCOPED.match(name)
        if match:
            scope, package = match.group(1), match.group(2)
            if scope is not None and _url_safe(scope) and _url_safe(package):
                return result
        result.errors.append("name can only contain URL-friendly characters")

    return result


def is_valid_for_new_packages(name) -> bool:
    return check_package_name(name).valid_for_new_packages
