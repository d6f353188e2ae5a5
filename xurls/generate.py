"""Regenerate the TLD and scheme lists from their published registries."""

from __future__ import annotations

import argparse
import csv
import io
import json
import logging
import re
import urllib.request
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor

__all__ = [
    "TLD_SOURCES",
    "SCHEMES_URL",
    "clean_tld",
    "extract_tlds",
    "parse_schemes_csv",
    "fetch_tlds",
    "fetch_schemes",
    "render_tlds",
    "render_schemes",
    "main",
]

log = logging.getLogger(__name__)

#: Registries listing top-level domains, each with the pattern that picks
#: a TLD out of one of its lines.
TLD_SOURCES: tuple[tuple[str, str], ...] = (
    ("https://data.iana.org/TLD/tlds-alpha-by-domain.txt", r"^[^#]+$"),
    ("https://publicsuffix.org/list/effective_tld_names.dat", r"^[^/.]+$"),
)

#: Registry of assigned URI schemes, as CSV.
SCHEMES_URL = "https://www.iana.org/assignments/uri-schemes/uri-schemes-1.csv"

_TIMEOUT = 60


def _download(url: str) -> str:
    """Fetch *url* and return its body as text."""
    log.info("Fetching %s", url)
    with urllib.request.urlopen(url, timeout=_TIMEOUT) as response:
        status = getattr(response, "status", 200)
        if status >= 400:
            raise OSError(f"{url}: HTTP status {status}")
        return response.read().decode("utf-8")


def clean_tld(tld: str) -> str:
    """Lower-case a TLD; punycode ("xn--") names become the empty string."""
    tld = tld.lower()
    if tld.startswith("xn--"):
        return ""
    return tld


def extract_tlds(lines: Iterable[str], pattern) -> list[str]:
    """Return the cleaned TLD that *pattern* finds in each line, skipping blanks."""
    compiled = re.compile(pattern)
    found = []
    for line in lines:
        match = compiled.search(line.rstrip("\r\n"))
        tld = clean_tld(match.group() if match else "")
        if tld:
            found.append(tld)
    return found


def parse_schemes_csv(text: str) -> list[str]:
    """Return the first column of every record of the CSV *text*, minus its header."""
    rows = (row for row in csv.reader(io.StringIO(text, newline="")) if row)
    next(rows, None)
    return [row[0] for row in rows]


def _tlds_from(source: tuple[str, str]) -> list[str]:
    url, pattern = source
    return extract_tlds(_download(url).split("\n"), pattern)


def fetch_tlds() -> tuple[list[str], list[str]]:
    """Download every TLD registry.

    Returns the sorted, de-duplicated TLDs and the URLs they came from.
    Raises RuntimeError if any registry could not be read.
    """
    urls = [url for url, _ in TLD_SOURCES]
    with ThreadPoolExecutor(max_workers=len(TLD_SOURCES)) as pool:
        futures = [pool.submit(_tlds_from, source) for source in TLD_SOURCES]
    found: set[str] = set()
    failed = False
    for future in futures:
        try:
            found.update(future.result())
        except (OSError, UnicodeDecodeError) as err:
            log.error("%s", err)
            failed = True
    if failed:
        raise RuntimeError("there were some errors while fetching the TLDs")
    return sorted(found), urls


def fetch_schemes() -> list[str]:
    """Download the list of assigned URI schemes, in registry order."""
    return parse_schemes_csv(_download(SCHEMES_URL))


def _quote(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


def render_tlds(tlds: Iterable[str], urls: Iterable[str]) -> str:
    """Return the source of a module defining TLDS, citing *urls*."""
    lines = [
        '"""Public top-level domains. Generated by xurls.generate."""',
        "",
        "# All public top-level domains, in sorted order.",
        "#",
        "# Sources:",
    ]
    lines.extend(f"#  * {url}" for url in urls)
    lines.append("TLDS: tuple[str, ...] = (")
    lines.extend(f"    {_quote(tld)}," for tld in tlds)
    lines.append(")")
    return "\n".join(lines) + "\n"


def render_schemes(schemes: Iterable[str]) -> str:
    """Return the source of a module defining STD_SCHEMES."""
    lines = [
        '"""Assigned URI schemes. Generated by xurls.generate."""',
        "",
        "# All assigned URI schemes, in registry order.",
        "#",
        "# Source:",
        f"#  * {SCHEMES_URL}",
        "STD_SCHEMES: tuple[str, ...] = (",
    ]
    lines.extend(f"    {_quote(scheme)}," for scheme in schemes)
    lines.append(")")
    return "\n".join(lines) + "\n"


def _write(path: str, text: str) -> None:
    with open(path, "w", encoding="utf-8", newline="\n") as handle:
        handle.write(text)


def main(argv: list[str] | None = None) -> int:
    """Fetch a registry and write the generated module; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="xurls-generate",
        description="Regenerate the TLD or scheme list from its registry.",
    )
    parser.add_argument("target", choices=("tlds", "schemes"))
    parser.add_argument("-o", "--output", help="file to write")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    try:
        if args.target == "tlds":
            tlds, urls = fetch_tlds()
            text = render_tlds(tlds, urls)
            path = args.output or "tlds.py"
        else:
            text = render_schemes(fetch_schemes())
            path = args.output or "schemes.py"
    except (OSError, RuntimeError, UnicodeDecodeError, csv.Error) as err:
        log.error("Could not get %s list: %s", args.target, err)
        return 1

    log.info("Generating %s...", path)
    try:
        _write(path, text)
    except OSError as err:
        log.error("Could not write %s: %s", path, err)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())