from unifs.config.env_loader import load_env_file


def _write_env(tmp_path, name, content):
    env_dir = tmp_path / ".env"
    env_dir.mkdir(exist_ok=True)
    (env_dir / f"{name}.env").write_text(content)


def test_missing_file_returns_empty(tmp_path):
    assert load_env_file("nope", project_root=tmp_path) == {}


def test_parses_key_values(tmp_path):
    _write_env(
        tmp_path,
        "local",
        "UNIFS_ADAPTERS=default=memory,archive=minio\nFS_MINIO_BUCKET=files\n",
    )
    result = load_env_file("local", project_root=tmp_path)
    assert result == {
        "UNIFS_ADAPTERS": "default=memory,archive=minio",
        "FS_MINIO_BUCKET": "files",
    }


def test_skips_comments_and_blank_lines(tmp_path):
    _write_env(tmp_path, "dev", "# comment\n\nA=1\nnot a pair\n")
    assert load_env_file("dev", project_root=tmp_path) == {"A": "1"}


def test_strips_quotes_and_export(tmp_path):
    _write_env(tmp_path, "dev", "export A=\"quoted value\"\nB='single'\n")
    assert load_env_file("dev", project_root=tmp_path) == {
        "A": "quoted value",
        "B": "single",
    }


def test_inline_comments_are_kept(tmp_path):
    _write_env(tmp_path, "dev", "A=value # not a comment\n")
    assert load_env_file("dev", project_root=tmp_path) == {"A": "value # not a comment"}
