# vulndomains/scan.py
import argparse
import logging
import os

from vulndomains.config import (
    INPUT_ENCODING, INPUT_ERRORS, LOG_LEVEL, RECORD_PREFIX, RECORD_SUFFIX, RECORD_SEPARATOR
)
from vulndomains.domain_utils import split_domain, is_vulnerable

logger = logging.getLogger(__name__)

DESCRIPTION = """\
Extract the list of domains that are vulnerable to the undetectable punycode
phishing attack disclosed by Xudong Zheng: a registered name whose second-level
label only uses letters with a Cyrillic lookalike can be rebuilt as an IDN that
browsers display exactly like the original.
"""

EPILOG = """\
FILE is expected to be a list of domains in the format produced by the script
https://gist.github.com/chilts/7229605, one "[ <index>, '<hostname>' ]" record
per line. Malformed lines are skipped.
"""


def parse_record(line: str):
    """Hostname from a "[ 12, 'example.com' ]" record, or None if malformed."""
    line = line.rstrip("\r\n").removeprefix(RECORD_PREFIX).removesuffix(RECORD_SUFFIX)
    fields = line.split(RECORD_SEPARATOR)
    if len(fields) != 2:
        return None
    return fields[1].strip("'")


def scan_lines(lines, splitter=split_domain):
    found = []
    for pos, line in enumerate(lines, 1):
        host = parse_record(line)
        if host is None:
            logger.debug("skipping malformed line #%d: %r", pos, line)
            continue
        _, domain, _ = splitter(host)
        if is_vulnerable(domain):
            found.append(host)
    return found


def _read_lines(f):
    pos = 0
    while True:
        pos += 1
        try:
            line = f.readline()
        except OSError as e:
            logger.warning("failed to read line #%d: %s", pos, e)
            return
        if not line:
            return
        yield line


def scan_file(path, splitter=split_domain):
    with open(path, "r", encoding=INPUT_ENCODING, errors=INPUT_ERRORS) as f:
        found = scan_lines(_read_lines(f), splitter)
    logger.info("Found %d vulnerable domains in %s", len(found), path)
    return found


def format_report(hosts) -> str:
    return f"Vulnerable domains ({len(hosts)}):\n\n" + "\n".join(hosts) + "\n"


def build_parser():
    ap = argparse.ArgumentParser(
        prog="vulndomains",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    ap.add_argument("file", nargs="?", metavar="FILE", help="path to the domain list")
    return ap


def main(argv=None):
    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")
    args = build_parser().parse_args(argv)

    if not args.file:
        raise SystemExit("❌ missing file in argument")
    if not os.path.isfile(args.file):
        raise SystemExit(f"❌ failed to open input file: {args.file}")
    try:
        found = scan_file(args.file)
    except OSError as e:
        raise SystemExit(f"❌ failed to open input file: {e}")

    print(format_report(found), end="")


if __name__ == "__main__":
    main()
