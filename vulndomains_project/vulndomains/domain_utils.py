# vulndomains/domain_utils.py
import logging
from functools import lru_cache
from typing import Callable, NamedTuple

import tldextract

from vulndomains.config import (
    ALPHABET, PSL_URLS, PSL_CACHE_DIR, INCLUDE_PRIVATE_SUFFIXES
)

logger = logging.getLogger(__name__)


class SplitResult(NamedTuple):
    subdomain: str = ""
    domain: str = ""
    tld: str = ""

    @property
    def suffix(self) -> str:
        # tld carries a leading "." when it was stripped off a longer hostname
        return self.tld[1:] if self.tld.startswith(".") else self.tld


@lru_cache(maxsize=None)
def get_extractor() -> tldextract.TLDExtract:
    kwargs = {
        "suffix_list_urls": PSL_URLS,
        "include_psl_private_domains": INCLUDE_PRIVATE_SUFFIXES,
    }
    if PSL_CACHE_DIR:
        kwargs["cache_dir"] = PSL_CACHE_DIR
    logger.debug("Building PSL extractor (urls=%s, private=%s)", PSL_URLS or "snapshot", INCLUDE_PRIVATE_SUFFIXES)
    return tldextract.TLDExtract(**kwargs)


def public_suffix(hostname: str) -> tuple[str, bool]:
    """Longest matching public suffix of `hostname` and whether it is an ICANN one.

    Hosts no rule matches fall back to the implicit "*" rule: the last label
    is the suffix, reported as non-ICANN. IP addresses have no suffix.
    The returned suffix is always a literal tail of `hostname`.
    """
    ext = get_extractor()(hostname)
    suffix = ext.suffix or ""
    # tldextract parses URLs: ports, userinfo and IDN dots are normalized away
    if suffix and (suffix == hostname or hostname.endswith("." + suffix)):
        return suffix, not ext.is_private
    if ext.ipv4 or ext.ipv6:
        return "", False
    return hostname.rsplit(".", 1)[-1], False


def split_domain(hostname: str,
                 public_suffix: Callable[[str], tuple[str, bool]] = public_suffix) -> SplitResult:
    """Split `hostname` into (subdomain, domain, tld).

    If the hostname is itself a public suffix ("co.uk"), the last two labels
    are used as domain and tld. Otherwise the suffix is stripped and returned
    with a leading dot (".co.uk"), and the label just before it is the domain.
    With no suffix (IP addresses) tld is empty and the last label is the domain.
    """
    if hostname == "":
        return SplitResult()

    suffix, _ = public_suffix(hostname)
    if suffix == hostname:
        labels = hostname.split(".")
        if len(labels) == 1:
            return SplitResult(domain=labels[0])
        if len(labels) == 2:
            return SplitResult(domain=labels[0], tld=labels[1])
        return SplitResult(".".join(labels[:-2]), labels[-2], labels[-1])

    tld = "." + suffix if suffix else ""
    labels = hostname.removesuffix(tld).split(".")
    if len(labels) == 1:
        return SplitResult(domain=labels[0], tld=tld)
    return SplitResult(".".join(labels[:-1]), labels[-1], tld)


def is_vulnerable(label: str, alphabet: frozenset = ALPHABET) -> bool:
    """True if every character of `label` has a homograph lookalike.

    An empty label is vacuously vulnerable.
    """
    return all(ch in alphabet for ch in label)
