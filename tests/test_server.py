import io

import pytest
from werkzeug.test import Client

from plumlabs.api import API, UPLOAD_OK
from plumlabs.conversion import markdown_to_html
from plumlabs.server import Server, load_port, main
from plumlabs.storage import open_database


def write_templates(directory):
    directory.mkdir(parents=True, exist_ok=True)
    (directory / "article.html").write_text("<article>{{ HTMLContent }}</article>")
    (directory / "articles.html").write_text(
        "{% for title in Titles %}<li>{{ title }}</li>{% endfor %}"
    )
    return directory


@pytest.fixture
def api(tmp_path):
    db = open_database(":memory:")
    yield API(db, str(write_templates(tmp_path / "templates")))
    db.close()


@pytest.fixture
def static_dir(tmp_path):
    directory = tmp_path / "static"
    directory.mkdir()
    (directory / "style.css").write_text("body {}")
    return directory


@pytest.fixture
def client(api, static_dir):
    server = Server(api, "8080", str(static_dir))
    server.setup_routes()
    return Client(server)


def test_port_is_kept(api, static_dir):
    assert Server(api, 8080, str(static_dir)).port == "8080"


def test_no_routes_before_setup(api, static_dir):
    response = Client(Server(api, "8080", str(static_dir))).get("/api/articles/getall")
    assert response.status_code == 404
    assert response.get_data(as_text=True) == "404 page not found\n"


def test_upload_list_and_get(client):
    content = b"# Hi\nplain words\n"
    response = client.post(
        "/api/upload", data={"file": (io.BytesIO(content), "hi.md")}
    )
    assert response.get_data(as_text=True) == UPLOAD_OK
    assert client.get("/api/articles/getall").get_data(as_text=True) == "<li>hi</li>"
    body = client.get("/api/article/get", query_string={"title": "hi"}).get_data(
        as_text=True
    )
    assert body == "<article>" + markdown_to_html(content.decode()) + "</article>"


def test_delete_route(client):
    client.post("/api/upload", data={"file": (io.BytesIO(b"# Hi\n"), "hi.md")})
    response = client.post("/api/article/delete", data={"title": "hi"})
    assert response.status_code == 200
    assert client.get("/api/articles/getall").get_data(as_text=True) == ""


def test_static_files(client):
    response = client.get("/style.css")
    assert response.status_code == 200
    assert response.get_data(as_text=True) == "body {}"


def test_unknown_static_path(client):
    assert client.get("/missing.js").status_code == 404


def test_load_port(tmp_path, monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("PORT=9999\n")
    assert load_port(str(env_file)) == "9999"


def test_load_port_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_port(str(tmp_path / "absent.env"))


def test_load_port_without_port(tmp_path, monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("OTHER=1\n")
    with pytest.raises(RuntimeError, match="PORT not set"):
        load_port(str(env_file))


def test_server_reads_port_from_env_file(api, tmp_path, monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    (tmp_path / ".env").write_text("PORT=7070\n")
    monkeypatch.chdir(tmp_path)
    assert Server(api).port == "7070"


def test_main_fails_without_env_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    templates = write_templates(tmp_path / "templates")
    with pytest.raises(SystemExit):
        main(
            [
                "--env-file", str(tmp_path / "absent.env"),
                "--database", str(tmp_path / "db.sqlite"),
                "--templates", str(templates),
            ]
        )


def test_main_fails_without_templates(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SystemExit):
        main(
            [
                "--database", str(tmp_path / "db.sqlite"),
                "--templates", str(tmp_path / "none"),
            ]
        )