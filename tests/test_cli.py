import asyncio
import json
import logging

import pytest

from repo_contents.__main__ import main


def run_cli(capsys, *argv):
    asyncio.run(main(list(argv)))
    return json.loads(capsys.readouterr().out)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ('CONTENTS_BRANCH', 'COMMITTER_NAME', 'COMMITTER_EMAIL'):
        monkeypatch.delenv(name, raising=False)


def test_create_inline_content(capsys):
    body = run_cli(capsys, 'create', '-m', 'add readme', '--content', 'hello')
    assert body == {'message': 'add readme', 'content': 'aGVsbG8='}


def test_create_without_content(capsys):
    body = run_cli(capsys, 'create', '-m', 'add empty file')
    assert body == {'message': 'add empty file', 'content': ''}


def test_update_from_file(capsys, tmp_path):
    path = tmp_path / 'README.md'
    path.write_bytes(b'hello')
    body = run_cli(
        capsys,
        'update', '-m', 'fix typo', '-f', str(path), '--sha', 'a1b2c3', '-b', 'dev',
    )
    assert body == {
        'message': 'fix typo', 'branch': 'dev', 'content': 'aGVsbG8=', 'sha': 'a1b2c3',
    }


def test_delete_with_author(capsys):
    body = run_cli(
        capsys,
        'delete', '-m', 'remove old file', '--sha', 'a1b2c3',
        '--author-name', 'Octo Cat', '--author-email', 'octocat@github.com',
    )
    assert body == {
        'message': 'remove old file',
        'author': {'name': 'Octo Cat', 'email': 'octocat@github.com'},
        'sha': 'a1b2c3',
    }


def test_environment_defaults(capsys, monkeypatch):
    monkeypatch.setenv('CONTENTS_BRANCH', 'release')
    monkeypatch.setenv('COMMITTER_NAME', 'Bot')
    monkeypatch.setenv('COMMITTER_EMAIL', 'bot@example.com')
    body = run_cli(capsys, 'delete', '-m', 'remove', '--sha', 'a1')
    assert body['branch'] == 'release'
    assert body['committer'] == {'name': 'Bot', 'email': 'bot@example.com'}


def test_flags_override_environment(capsys, monkeypatch):
    monkeypatch.setenv('CONTENTS_BRANCH', 'release')
    monkeypatch.setenv('COMMITTER_NAME', 'Bot')
    body = run_cli(capsys, 'delete', '-m', 'remove', '--sha', 'a1', '-b', 'dev')
    assert body['branch'] == 'dev'
    assert 'committer' not in body


def test_partial_signature_is_rejected():
    with pytest.raises(SystemExit) as exc_info:
        asyncio.run(main(['delete', '-m', 'remove', '--sha', 'a1', '--author-name', 'Octo']))
    assert exc_info.value.code == 2


def test_invalid_sha_is_usage_error():
    with pytest.raises(SystemExit) as exc_info:
        asyncio.run(main(['delete', '-m', 'remove', '--sha', '']))
    assert exc_info.value.code == 2


def test_missing_content_file(tmp_path):
    with pytest.raises(ValueError):
        asyncio.run(main(['create', '-m', 'add', '-f', str(tmp_path / 'missing')]))


def test_debug_log_leaves_out_content(capsys, caplog):
    caplog.set_level(logging.DEBUG, logger='repo_contents.__main__')
    run_cli(capsys, 'create', '-m', 'add readme', '--content', 'hello', '-v')
    assert 'add readme' in caplog.text
    assert 'aGVsbG8=' not in caplog.text
