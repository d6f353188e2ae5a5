import pytest

from xurls.patterns import (
    KNOWN_SCHEMES_RELAXED,
    KNOWN_SCHEMES_STRICT,
    RELAXED,
    STRICT,
    scheme_alternation,
    strict_matching_scheme,
    tld_alternation,
)


def matched_text(match):
    return match.group() if match else ""


def want_str(text, want):
    if isinstance(want, str):
        return want
    if want is True:
        return text
    return ""


CONSTANT_CASES = [
    ("", None),
    (" ", None),
    (":", None),
    ("::", None),
    (":::", None),
    ("::::", None),
    (".", None),
    ("..", None),
    ("...", None),
    ("1.1", None),
    (".1.", None),
    ("1.1.1", None),
    ("1:1", None),
    (":1:", None),
    ("1:1:1", None),
    ("://", None),
    ("foo", None),
    ("foo:", None),
    ("mailto:", None),
    ("foo://", None),
    ("http://", None),
    ("http:// foo", None),
    ("http:// foo", None),
    (":foo", None),
    ("://foo", None),
    ("foorandom:bar", None),
    ("foo.randombar", None),
    ("zzz.", None),
    (".zzz", None),
    ("zzz.zzz", None),
    ("/some/path", None),
    ("rel/path", None),
    ("localhost", None),
    ("com", None),
    (".com", None),
    ("com.", None),
    ("http", None),
    ("http://foo", True),
    ("http://FOO", True),
    ("http://FAÀ", True),
    ("https://localhost", True),
    ("git+https://localhost", True),
    ("foo.bar://localhost", True),
    ("foo-bar://localhost", True),
    ("mailto:foo", True),
    ("MAILTO:foo", True),
    ("sms:123", True),
    ("xmpp:foo@bar", True),
    ("bitcoin:Addr23?amount=1&message=foo", True),
    ("http://foo.com", True),
    ("http://foo.co.uk", True),
    ("http://foo.random", True),
    (" http://foo.com/bar ", "http://foo.com/bar"),
    (" http://foo.com/bar more", "http://foo.com/bar"),
    ("<http://foo.com/bar>", "http://foo.com/bar"),
    ("<http://foo.com/bar>more", "http://foo.com/bar"),
    (".http://foo.com/bar.", "http://foo.com/bar"),
    (".http://foo.com/bar.more", "http://foo.com/bar.more"),
    (",http://foo.com/bar,", "http://foo.com/bar"),
    (",http://foo.com/bar,more", "http://foo.com/bar,more"),
    ("(http://foo.com/bar)", "http://foo.com/bar"),
    ("(http://foo.com/bar)more", "http://foo.com/bar"),
    ("[http://foo.com/bar]", "http://foo.com/bar"),
    ("[http://foo.com/bar]more", "http://foo.com/bar"),
    ("'http://foo.com/bar'", "http://foo.com/bar"),
    ("'http://foo.com/bar'more", "http://foo.com/bar'more"),
    ('"http://foo.com/bar"', "http://foo.com/bar"),
    ("http://a.b/a0/-+_&~*%=#@.,:;'?!|[]()a", True),
    ("http://a.b/a0/$€¥", True),
    ("http://✪foo.bar/pa✪th©more", True),
    ("http://foo.bar/path/", True),
    ("http://foo.bar/path-", True),
    ("http://foo.bar/path+", True),
    ("http://foo.bar/path_", True),
    ("http://foo.bar/path&", True),
    ("http://foo.bar/path~", True),
    ("http://foo.bar/path*", True),
    ("http://foo.bar/path%", True),
    ("http://foo.bar/path=", True),
    ("http://foo.bar/path#", True),
    ("http://foo.bar/path.", "http://foo.bar/path"),
    ("http://foo.bar/path,", "http://foo.bar/path"),
    ("http://foo.bar/path:", "http://foo.bar/path"),
    ("http://foo.bar/path;", "http://foo.bar/path"),
    ("http://foo.bar/path'", "http://foo.bar/path"),
    ("http://foo.bar/path?", "http://foo.bar/path"),
    ("http://foo.bar/path!", "http://foo.bar/path"),
    ("http://foo.bar/path@", "http://foo.bar/path"),
    ("http://foo.bar/path|", "http://foo.bar/path"),
    ("http://foo.bar/path<", "http://foo.bar/path"),
    ("http://foo.bar/path<more", "http://foo.bar/path"),
    ("http://foo.com/path_(more)", True),
    ("(http://foo.com/path_(more))", "http://foo.com/path_(more)"),
    ("http://foo.com/path_(even)-(more)", True),
    ("http://foo.com/path_(even)(more)", True),
    ("http://foo.com/path_(even_(nested))", True),
    ("(http://foo.com/path_(even_(nested)))", "http://foo.com/path_(even_(nested))"),
    ("http://foo.com/path_[more]", True),
    ("[http://foo.com/path_[more]]", "http://foo.com/path_[more]"),
    ("http://foo.com/path_[even]-[more]", True),
    ("http://foo.com/path_[even][more]", True),
    ("http://foo.com/path_[even_[nested]]", True),
    ("[http://foo.com/path_[even_[nested]]]", "http://foo.com/path_[even_[nested]]"),
    ("http://foo.com/path_{more}", True),
    ("{http://foo.com/path_{more}}", "http://foo.com/path_{more}"),
    ("http://foo.com/path_{even}-{more}", True),
    ("http://foo.com/path_{even}{more}", True),
    ("http://foo.com/path_{even_{nested}}", True),
    ("{http://foo.com/path_{even_{nested}}}", "http://foo.com/path_{even_{nested}}"),
    ("http://foo.com/path#fragment", True),
    ("http://foo.com/emptyfrag#", True),
    ("http://foo.com/spaced%20path", True),
    ("http://foo.com/?p=spaced%20param", True),
    ("http://test.foo.com/", True),
    ("http://foo.com/path", True),
    ("http://foo.com:8080/path", True),
    ("http://1.1.1.1/path", True),
    ("http://1080::8:800:200c:417a/path", True),
    ("http://中国.中国/中国", True),
    ("http://中国.中国/foo中国", True),
    ("http://उदाहरण.परीकषा", True),
    ("http://xn-foo.xn--p1acf/path", True),
    ("what is http://foo.com?", "http://foo.com"),
    ("go visit http://foo.com/path.", "http://foo.com/path"),
    ("go visit http://foo.com/path...", "http://foo.com/path"),
    ("what is http://foo.com/path?", "http://foo.com/path"),
    ("the http://foo.com!", "http://foo.com"),
    ("https://test.foo.bar/path?a=b", "https://test.foo.bar/path?a=b"),
    ("ftp://user@example.com", True),
    ("http://foo.com/base64-bCBwbGVhcw==", True),
    ("http://foo.com/🐼", True),
    ("https://shmibbles.me/tmp/自殺でも？.png", True),
]

RELAXED_CASES = [
    ("foo.a", None),
    ("foo.com", True),
    ("foo.com bar.com", "foo.com"),
    ("foo.com-foo", "foo.com"),
    ("foo.company", True),
    ("foo.comrandom", None),
    ("foo.example", True),
    ("foo.i2p", True),
    ("foo.local", True),
    ("foo.onion", True),
    ("中国.中国", True),
    ("中国.中国/foo中国", True),
    ("foo.com/", True),
    ("1.1.1.1", True),
    ("10.50.23.250", True),
    ("121.1.1.1", True),
    ("255.1.1.1", True),
    ("300.1.1.1", None),
    ("1.1.1.300", None),
    ("foo@1.2.3.4", "1.2.3.4"),
    ("1080:0:0:0:8:800:200C:4171", True),
    ("3ffe:2a00:100:7031::1", True),
    ("1080::8:800:200c:417a", True),
    ("foo.com:8080", True),
    ("foo.com:8080/path", True),
    ("test.foo.com", True),
    ("test.foo.com/path", True),
    ("test.foo.com/path/more/", True),
    ("TEST.FOO.COM/PATH", True),
    ("TEST.FÓO.COM/PÁTH", True),
    ("foo.com/path_(more)", True),
    ("foo.com/path_(even)_(more)", True),
    ("foo.com/path_(more)/more", True),
    ("foo.com/path_(more)/end)", "foo.com/path_(more)/end"),
    ("www.foo.com", True),
    (" foo.com/bar ", "foo.com/bar"),
    (" foo.com/bar more", "foo.com/bar"),
    ("<foo.com/bar>", "foo.com/bar"),
    ("<foo.com/bar>more", "foo.com/bar"),
    (",foo.com/bar.", "foo.com/bar"),
    (",foo.com/bar.more", "foo.com/bar.more"),
    (",foo.com/bar,", "foo.com/bar"),
    (",foo.com/bar,more", "foo.com/bar,more"),
    ("(foo.com/bar)", "foo.com/bar"),
    ("\"foo.com/bar'", "foo.com/bar"),
    ("\"foo.com/bar'more", "foo.com/bar'more"),
    ('"foo.com/bar"', "foo.com/bar"),
    ("what is foo.com?", "foo.com"),
    ("the foo.com!", "foo.com"),
    ("foo@bar", None),
    ("foo@bar.a", None),
    ("user@example.com", "example.com"),
    ("user@sub.example.com", "sub.example.com"),
]

STRICT_CASES = [
    ("http:// foo.com", None),
    ("foo.a", None),
    ("foo.com", None),
    ("foo.com/", None),
    ("1.1.1.1", None),
    ("3ffe:2a00:100:7031::1", None),
    ("test.foo.com:8080/path", None),
    ("user@example.com", None),
]

MATCHING_SCHEME_CASES = [
    ("foo.com", None),
    ("user@example.com", None),
    ("http://foo", True),
    ("Http://foo", True),
    ("https://foo", None),
    ("ftp://foo", True),
    ("ftps://foo", True),
    ("mailto:foo", True),
    ("MAILTO:foo", True),
    ("sms:123", None),
]


@pytest.mark.parametrize("text,want", CONSTANT_CASES)
def test_relaxed_constant_cases(text, want):
    assert matched_text(RELAXED.search(text)) == want_str(text, want)


@pytest.mark.parametrize("text,want", CONSTANT_CASES)
def test_strict_constant_cases(text, want):
    assert matched_text(STRICT.search(text)) == want_str(text, want)


@pytest.mark.parametrize("text,want", RELAXED_CASES)
def test_relaxed_cases(text, want):
    assert matched_text(RELAXED.search(text)) == want_str(text, want)


@pytest.mark.parametrize("text,want", STRICT_CASES)
def test_strict_cases(text, want):
    assert matched_text(STRICT.search(text)) == want_str(text, want)


@pytest.mark.parametrize(
    "exp,valid",
    [
        ("http://", True),
        ("https?://", True),
        ("http://|mailto:", True),
        ("http://(", False),
    ],
)
def test_strict_matching_scheme_errors(exp, valid):
    if valid:
        pattern = strict_matching_scheme(exp)
        assert matched_text(pattern.search("http://foo")) == "http://foo"
    else:
        with pytest.raises(ValueError):
            strict_matching_scheme(exp)


@pytest.mark.parametrize("text,want", MATCHING_SCHEME_CASES)
def test_strict_matching_scheme(text, want):
    pattern = strict_matching_scheme("http://|ftps?://|mailto:")
    assert matched_text(pattern.search(text)) == want_str(text, want)


def test_relaxed_search_trims_trailing_question_mark():
    match = RELAXED.search("Do people live in http://example.org?")
    assert matched_text(match) == "http://example.org"


def test_relaxed_finditer():
    found = [m.group() for m in RELAXED.finditer("foo.com is http://foo.com/.")]
    assert found == ["foo.com", "http://foo.com/"]


def test_findall_returns_whole_matches():
    assert RELAXED.findall("foo.com is http://foo.com/.") == ["foo.com", "http://foo.com/"]


def test_known_schemes_strict():
    assert matched_text(KNOWN_SCHEMES_STRICT.search("ssh://host")) == "ssh://host"
    assert matched_text(KNOWN_SCHEMES_STRICT.search("mailto:foo")) == "mailto:foo"
    assert matched_text(KNOWN_SCHEMES_STRICT.search("foo.com")) == ""


def test_known_schemes_relaxed():
    assert matched_text(KNOWN_SCHEMES_RELAXED.search("foo.com")) == "foo.com"
    assert (
        matched_text(KNOWN_SCHEMES_RELAXED.search("https://foo.com/bar"))
        == "https://foo.com/bar"
    )


def test_tld_alternation_adds_punycode():
    assert tld_alternation(["中国"], []) == "(?i:(?:xn--fiqs8s|中国))"


def test_tld_alternation_sorts():
    assert tld_alternation(["org", "com"], ["local"]) == "(?i:(?:com|local|org))"


def test_tld_alternation_rejects_duplicates():
    with pytest.raises(ValueError, match="duplicate"):
        tld_alternation(["com"], ["com"])


def test_scheme_alternation():
    assert scheme_alternation(["mailto", "sms"]) == "(?i:(?:mailto|sms)):"


def test_punycode_domain_is_relaxed_match():
    assert matched_text(RELAXED.search("foo.xn--fiqs8s")) == "foo.xn--fiqs8s"