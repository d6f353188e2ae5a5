# xurls

Extract URLs from plain text with regular expressions.

Two kinds of matching are offered:

- **strict** matching finds only URLs that carry a scheme, such as
  `https://example.com/path` or `mailto:someone@example.com`;
- **relaxed** matching also finds bare hosts such as `example.com/path` or
  `10.0.0.1`, recognised by a known top-level domain or an IP address.

Trailing punctuation is left out of a match (`see http://example.com/path.`
gives `http://example.com/path`), while balanced parentheses, brackets and
braces inside a path are kept. Among matches starting at the same place, the
longest one is taken.

## Installation

```
pip install .
```

## Command line

```
xurls [-r | -m REGEXP] [files...]
```

Each file is read word by word, and every URL found is printed on its own
line. With no files, or with `-` as a file name, standard input is read.

- `-r` also matches URLs without a scheme (relaxed).
- `-m REGEXP` only matches URLs whose scheme matches the regular expression,
  ignoring case, for example `-m 'https?://|mailto:'`.

Giving `-r` and `-m` together is an error, as is an invalid expression or a
file that cannot be opened; the command then prints a message and exits
with status 1.

```
$ echo "Is the page at http://example.org?" | xurls
http://example.org
$ echo "example.com is http://example.com/." | xurls -r
example.com
http://example.com/
```

## Library

```python
from xurls.patterns import strict_matching_scheme

pattern = strict_matching_scheme(r"https?://|mailto:")
pattern.findall("write to mailto:someone@example.com or see https://example.com")
```

`strict_matching_scheme` raises `ValueError` if the expression does not
compile.

The `xurls.patterns` module also provides ready compiled patterns:

- `STRICT` – URLs with any scheme of the form `name://`, or one of a few
  well-known schemes followed by `:` (such as `mailto:` and `tel:`);
- `RELAXED` – as `STRICT`, plus bare hosts and IP addresses;
- `KNOWN_SCHEMES_STRICT` and `KNOWN_SCHEMES_RELAXED` – the same, but only
  with registered schemes.

`tld_alternation(tlds, pseudo_tlds)` and `scheme_alternation(schemes)` build
pattern fragments from your own lists of top-level domains and schemes;
`tld_alternation` also accepts the punycode form of non-ASCII domains and
raises `ValueError` on a duplicate. The lists used by default live in
`xurls.tlds` (`TLDS`, `PSEUDO_TLDS`) and `xurls.schemes` (`STD_SCHEMES`,
`SCHEMES_NO_AUTHORITY`).

## Refreshing the lists

The top-level domain and scheme lists are taken from the public registries.
`xurls-generate` downloads one of them and writes a fresh module:

```
xurls-generate tlds            # writes tlds.py, defining TLDS
xurls-generate schemes         # writes schemes.py, defining STD_SCHEMES
xurls-generate tlds -o out.py  # choose the output file
```

The generated modules hold only the downloaded list. The pseudo top-level
domains and the short list of schemes without `//` are not fetched from any
registry, so these files are not drop-in replacements for `xurls/tlds.py`
and `xurls/schemes.py`: copy the new list into them by hand.