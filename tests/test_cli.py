"""Tests for the admin CLI."""

import json

import pytest

from core.cli.manage import main
from core.config import get_settings
from core.db import db
from core.security import principal_from_token
from core.storage import BlobStore


@pytest.fixture
def cli_db():
    db.reset()
    db.initialize("sqlite://")
    yield db
    db.reset()


def test_no_command_prints_help(cli_db, capsys):
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out


def test_init_db_creates_upload_dirs(cli_db, capsys):
    assert main(["init-db"]) == 0

    assert (get_settings().upload_root_path / "resumes").is_dir()
    assert "Database ready" in capsys.readouterr().out


def test_create_user_and_issue_token(cli_db, capsys):
    assert main(["create-user", "--email", "cli@example.com", "--full-name", "Cli User"]) == 0
    created = capsys.readouterr().out
    user_id = int(created.split()[2])

    assert main(["issue-token", "--email", "cli@example.com", "--minutes", "5"]) == 0
    token = capsys.readouterr().out.strip()

    assert principal_from_token(token) == user_id


def test_create_user_twice_fails(cli_db, capsys):
    main(["create-user", "--email", "dup@example.com"])

    assert main(["create-user", "--email", "dup@example.com"]) == 1
    assert "already exists" in capsys.readouterr().out


def test_issue_token_unknown_user(cli_db, capsys):
    assert main(["issue-token", "--email", "nobody@example.com"]) == 1


def test_list_skills_json(cli_db, capsys):
    main(["init-db"])
    capsys.readouterr()

    assert main(["list-skills", "--format", "json"]) == 0
    assert json.loads(capsys.readouterr().out) == []


def test_orphaned_assets_reports_unreferenced_files(cli_db, capsys):
    main(["init-db"])
    url = BlobStore(get_settings().upload_root_path).store(b"old", "old.pdf", "resumes")
    capsys.readouterr()

    assert main(["orphaned-assets", "--format", "json"]) == 0

    assert url in json.loads(capsys.readouterr().out)
