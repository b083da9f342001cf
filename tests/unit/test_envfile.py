"""Tests for .env rendering, writing and loading."""

from pathlib import Path

from forgesetup.envfile import load_env, render_env, write_env
from forgesetup.models import Answers


class TestRenderEnv:
    def test_three_clean_lines(self) -> None:
        content = render_env(Answers(token="abc", mongo_uri="mongodb://x", prefix="!"))
        assert content.splitlines() == [
            'TOKEN="abc"',
            'MONGO_URI="mongodb://x"',
            'PREFIX="!"',
        ]
        assert content.endswith("\n")

    def test_empty_values(self) -> None:
        content = render_env(Answers())
        assert content == 'TOKEN=""\nMONGO_URI=""\nPREFIX=""\n'

    def test_no_trailing_semicolons(self) -> None:
        content = render_env(Answers(token="a", mongo_uri="b", prefix="c"))
        assert ";" not in content


class TestWriteEnv:
    def test_writes_file(self, tmp_path: Path) -> None:
        path = write_env(tmp_path, Answers(token="abc"))
        assert path == tmp_path / ".env"
        assert 'TOKEN="abc"' in path.read_text()

    def test_overwrites_without_merge(self, tmp_path: Path) -> None:
        (tmp_path / ".env").write_text("OTHER=1\nTOKEN=old\n")
        write_env(tmp_path, Answers(token="new"))
        content = (tmp_path / ".env").read_text()
        assert "OTHER" not in content
        assert "old" not in content
        assert not (tmp_path / ".env.backup").exists()


class TestLoadEnv:
    def test_missing_file(self, tmp_path: Path) -> None:
        assert load_env(tmp_path / ".env") == {}

    def test_reads_written_file(self, tmp_path: Path) -> None:
        answers = Answers(token="abc", mongo_uri="mongodb://u:p@h/db?x=1", prefix="!")
        load = load_env(write_env(tmp_path, answers))
        assert load == {"TOKEN": "abc", "MONGO_URI": "mongodb://u:p@h/db?x=1", "PREFIX": "!"}

    def test_skips_comments_and_blank_lines(self, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("# comment\n\nKEY='single'\nnoequals\n")
        assert load_env(env_file) == {"KEY": "single"}

    def test_lone_quote_kept(self, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text('KEY="\n')
        assert load_env(env_file) == {"KEY": '"'}
