from catalog.utils.logging import get_project_name, get_project_version, get_pyproject_value


def write_pyproject(directory, body: str):
    (directory / "pyproject.toml").write_text(body, encoding="utf-8")


def test_reads_nested_key_from_parent_directory(tmp_path):
    write_pyproject(tmp_path, '[project]\nname = "demo-shop"\nversion = "2.0.1"\n')
    nested = tmp_path / "src" / "pkg"
    nested.mkdir(parents=True)

    assert get_pyproject_value("project.name", start=nested) == "demo-shop"
    assert get_project_version(start=nested, prefer_installed=False) == "2.0.1"


def test_missing_key_returns_default(tmp_path):
    write_pyproject(tmp_path, '[project]\nname = "demo-shop"\n')

    assert get_pyproject_value("project.urls.home", start=tmp_path, default="n/a") == "n/a"
    assert get_project_version(start=tmp_path, prefer_installed=False) == "unknown"


def test_unreadable_file_falls_back(tmp_path):
    write_pyproject(tmp_path, "this is = = not toml")

    assert get_project_name(start=tmp_path, max_up=1) == "product-catalog"


def test_repository_pyproject_names_the_service():
    assert get_project_name() == "product-catalog"
