import re
import logging

import pytest

from urigrammar.cli import main


def run(argv):
    with pytest.raises(SystemExit) as e:
        main(argv)
    return e.value.code


def strip_colors(s):
    return re.sub(r'\x1b\[[0-9;]*m', '', s)


def test_valid(capsys):
    assert run(['http://user@example.com:8080/a?b#c']) == 0

    out = capsys.readouterr().out
    assert 'valid http://user@example.com:8080/a?b#c' in out
    assert '  scheme: http\n' in out
    assert '  user_info: user\n' in out
    assert '  host: example.com\n' in out
    assert '  port: 8080\n' in out
    assert '  path: /a\n' in out
    assert '  query: b\n' in out
    assert '  fragment: c\n' in out
    assert '  host_kind: reg_name\n' in out


def test_invalid(capsys):
    assert run(['http://host/%A']) == 1
    assert 'invalid http://host/%A' in capsys.readouterr().out


def test_one_invalid_among_many(capsys):
    assert run(['a:b', 'http://[::1]/', '%']) == 1

    out = capsys.readouterr().out
    assert 'valid a:b' in out
    assert 'valid http://[::1]/' in out
    assert 'invalid %' in out


def test_input_file(tmp_path, capsys):
    path = tmp_path / 'uris.txt'
    path.write_text('mailto:foo@bar.com\n\n  http://999.1.1.1/  \n')

    assert run(['-i', str(path)]) == 0

    out = capsys.readouterr().out
    assert 'valid mailto:foo@bar.com' in out
    assert 'valid http://999.1.1.1/' in out
    assert 'invalid' not in out


def test_missing_file(tmp_path, capsys):
    assert run(['-i', str(tmp_path / 'missing.txt')]) == 2
    assert 'File does not exist' in capsys.readouterr().out


def test_nothing_given(capsys):
    assert run([]) == 2
    assert 'No URI given' in capsys.readouterr().out


def test_tree(capsys):
    assert run(['--tree', 'http://h/p']) == 0
    out = strip_colors(capsys.readouterr().out)
    # once after "valid", once for the tree
    assert out.count('http://h/p\n') == 2


def test_scan(tmp_path, capsys):
    path = tmp_path / 'page.txt'
    path.write_text('see http://a.com/x and mailto:b@c.org\n')

    assert run(['-i', str(path), '--scan']) == 0
    assert capsys.readouterr().out.splitlines() == ['http://a.com/x', 'mailto:b@c.org']


def test_scan_needs_input():
    assert run(['--scan', 'a:b']) == 2


def test_verbose_logs_rejections(caplog):
    caplog.set_level(logging.DEBUG, logger='urigrammar.cli')

    assert run(['-v', 'http://host/%A']) == 1
    assert "rejected 'http://host/%A'" in caplog.text
