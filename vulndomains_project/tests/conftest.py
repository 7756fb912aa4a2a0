import pytest


class FakePSL:
    """Dict-backed public suffix lookup: hostname -> suffix."""

    def __init__(self, answers):
        self.answers = answers
        self.calls = []

    def __call__(self, hostname):
        self.calls.append(hostname)
        suffix = self.answers.get(hostname, "")
        return suffix, bool(suffix)


@pytest.fixture
def fake_psl():
    return FakePSL


@pytest.fixture
def domain_list(tmp_path):
    def _write(*lines, raw=None):
        path = tmp_path / "domains.txt"
        if raw is not None:
            path.write_bytes(raw)
        else:
            path.write_text("".join(line + "\n" for line in lines), encoding="utf-8")
        return path
    return _write
